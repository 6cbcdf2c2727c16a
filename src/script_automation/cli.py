"""
CLI entrypoint:
  python -m script_automation --topic "5 best hiking trails in Patagonia" --style tutorial --duration short
  python -m script_automation --topic "..." --copy --output roteiro.txt
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from script_automation import config
from script_automation.adapters import default_adapters
from script_automation.application.pipeline import ScriptPipeline
from script_automation.domain.models import DurationClass, VideoStyle


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a narration script for a faceless YouTube video (Gemini)"
    )
    parser.add_argument("--topic", type=str, required=True, help="What the video is about")
    parser.add_argument(
        "--style",
        default=VideoStyle.default().value,
        help="Tone: " + ", ".join(s.value for s in VideoStyle) + " (Portuguese tags also accepted)",
    )
    parser.add_argument(
        "--duration",
        default=DurationClass.default().value,
        help="Length: short (2-4 min), medium (5-8 min), long (10+ min)",
    )
    parser.add_argument("--copy", action="store_true", help="Copy the script to the clipboard")
    parser.add_argument("--output", type=str, help="Also write the script to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pipeline = ScriptPipeline(**default_adapters())

    print("=" * 60)
    print(f"Generating script ({args.style}, {args.duration})...")
    print("=" * 60)

    asyncio.run(pipeline.generate_script(args.topic, args.style, args.duration))

    if pipeline.script is None:
        print(f"\n❌ {pipeline.error}")
        sys.exit(1)

    print()
    print(pipeline.script)
    print()

    if args.output:
        Path(args.output).write_text(pipeline.script + "\n", encoding="utf-8")
        print(f"✅ Script saved to: {args.output}")

    if args.copy:
        if pipeline.copy_script():
            print("✅ Copied to clipboard")
        else:
            print(f"⚠️  {pipeline.error}")


if __name__ == "__main__":
    main()
