"""
Local runner: composites a photo onto a background (and optionally tints it)
and writes PNGs to disk. This bypasses the HTTP layer but still calls remove.bg.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import config
from .pipeline import tint_image_bytes, update_background_bytes


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replace the background of a local image")
    parser.add_argument("--input", required=True, help="Path to the input image")
    parser.add_argument("--output", required=True, help="Path to write the composited PNG")
    parser.add_argument("--project-type", default=None, help="Asset folder to take the background from")
    parser.add_argument("--background", default=None, help="Background filename inside the project folder")
    parser.add_argument("--tint", action="store_true", help="Also write a tinted copy")
    parser.add_argument("--tint-output", default=None, help="Path for the tinted PNG (default: <output>-tinted.png)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, config.get_settings().log_level, logging.INFO))

    input_path = Path(args.input)
    output_path = Path(args.output)
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    png_bytes = update_background_bytes(
        input_path.read_bytes(),
        filename=input_path.name,
        project_type=args.project_type,
        background_choice=args.background,
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(png_bytes)
    print(f"Wrote composited output to {output_path}")

    if args.tint:
        tint_path = Path(args.tint_output) if args.tint_output else output_path.with_name(
            f"{output_path.stem}-tinted.png"
        )
        tint_path.parent.mkdir(parents=True, exist_ok=True)
        tint_path.write_bytes(tint_image_bytes(png_bytes))
        print(f"Wrote tinted output to {tint_path}")


if __name__ == "__main__":
    main()
