"""
swig-lls entry point
Run with: python -m swig_lls module.xml -o annotations/
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import GeneratorConfig
from .generator import LLSGenerator


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate LuaLS annotation files from SWIG XML")
    parser.add_argument("xml_file", type=Path)
    parser.add_argument("-o", "--output-dir", type=Path, default=None)
    parser.add_argument("--config", type=Path, default=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argument_parser().parse_args(argv)
    config = GeneratorConfig.from_file(args.config) if args.config else GeneratorConfig()

    report = LLSGenerator(args.xml_file, config).run(args.output_dir)
    for line in report.summary_lines():
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
