#!/usr/bin/env python3
"""
Generate an image with FLUX1 Pro and wait for the result.

Reads BFL_API_KEY from the environment (or .env).

Usage:
    python generate_image.py "A lighthouse at dusk"
    python generate_image.py "A lighthouse at dusk" --aspect-ratio 16:9 --png
    python generate_image.py "A lighthouse at dusk" --no-wait
"""

import argparse
import asyncio
import logging
import sys

from bfl_flux import (
    Flux1ProRequest,
    FluxError,
    ImageRequestBuilder,
    InvalidArgumentError,
    PollTimeoutError,
    create_flux_client,
)
from bfl_flux.config import get_settings


def build_request(args: argparse.Namespace) -> Flux1ProRequest:
    builder = ImageRequestBuilder.create().with_prompt(args.prompt).with_steps(args.steps)
    if args.aspect_ratio:
        builder.with_aspect_ratio(args.aspect_ratio, args.base_size)
    else:
        builder.with_dimensions(args.width, args.height)
    if args.seed is not None:
        builder.with_seed(args.seed)
    if args.png:
        builder.as_png()
    return builder.build_flux1_pro()


async def run(args: argparse.Namespace) -> int:
    try:
        request = build_request(args)
    except InvalidArgumentError as e:
        print(f"❌ {e}")
        return 1

    try:
        flux = create_flux_client()
    except FluxError as e:
        print(f"🔑 {e} (set BFL_API_KEY)")
        return 1

    async with flux as client:
        try:
            submitted = await client.image_generation.flux1_pro(request)
            print(f"🚀 Task started! ID: {submitted.id}")
            if args.no_wait:
                print(f"   Polling URL: {submitted.polling_url}")
                return 0

            print(f"⏳ Waiting (up to {args.max_attempts} x {args.delay}s)...")
            result = await client.utility.poll_result(
                submitted.id, max_attempts=args.max_attempts, delay_seconds=args.delay
            )
        except PollTimeoutError as e:
            print(f"⌛ {e}")
            return 2
        except FluxError as e:
            print(f"💥 Error: {e}")
            return 1

    if result.is_successful():
        sample = result.result_as_dict() or {}
        url = result.result_as_str() or sample.get("sample")
        print(f"✅ Success! Image URL: {url}")
        return 0

    print(f"❌ Failed: {result.status.value}")
    return 1


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="FLUX1 Pro image generation")
    parser.add_argument("prompt", help="Text prompt")
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=768)
    parser.add_argument("--aspect-ratio", help="Aspect ratio such as 16:9 (overrides width/height)")
    parser.add_argument("--base-size", type=int, default=1024, help="Longer side for --aspect-ratio")
    parser.add_argument("--steps", type=int, default=40)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--png", action="store_true", help="Request PNG instead of JPEG")
    parser.add_argument("--max-attempts", type=int, default=settings.poll_max_attempts)
    parser.add_argument("--delay", type=int, default=settings.poll_delay_seconds)
    parser.add_argument("--no-wait", action="store_true", help="Submit and exit without polling")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level.upper())

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
