#!/usr/bin/env python
"""Letterbox a local image and optionally print generated product copy."""
from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from resizer.services.copywriter import generate_copy
from resizer.services.dimensions import normalize_dimensions
from resizer.services.image_transformer import letterbox_image
from resizer.utils.filenames import build_output_filename


def main() -> None:
    parser = argparse.ArgumentParser(description="Fit an image on a 1000x1000 white canvas")
    parser.add_argument("image", type=Path)
    parser.add_argument("--width", default=800)
    parser.add_argument("--height", default=800)
    parser.add_argument("--product_name", default=None)
    parser.add_argument("--out_dir", type=Path, default=Path("."))
    parser.add_argument("--with_copy", action="store_true", help="Also ask the LLM for descriptions")
    args = parser.parse_args()

    dims = normalize_dimensions(args.width, args.height)
    output = letterbox_image(args.image.read_bytes(), dims)
    target = args.out_dir / build_output_filename(args.product_name, args.image.name)
    target.write_bytes(output)
    print(f"Wrote {target} ({dims.width}x{dims.height} box)")

    if args.with_copy and args.product_name:
        description = asyncio.run(generate_copy(args.product_name))
        print(json.dumps(description, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
