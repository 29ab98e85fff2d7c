# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Main entry point for the CV theme CLI.
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from cv_theme.errors import CVThemeError
from cv_theme.renderer import ThemeRenderer, load_resume
from cv_theme.settings import PHOTO_FAILURE_RAISE, ThemeSettings

logger = logging.getLogger(__name__)


def setup_logging(verbosity: int, quiet: bool = False, log_file: str = None):
    """
    Configures logging:
    - Console (rich): Default=WARNING, -q=ERROR, -v=INFO, -vv=DEBUG
    - File (optional): always DEBUG
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    if quiet:
        level = logging.ERROR
    elif verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        root.addHandler(file_handler)

    if verbosity < 2:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cv-theme", description="Render a JSON Resume to HTML (and PDF)")
    parser.add_argument("resume", help="Path to the resume JSON file, or '-' to read stdin")
    parser.add_argument("-o", "--output", default="resume.html", help="Output HTML file (default: resume.html)")
    parser.add_argument("--pdf", help="Also print the page to this PDF file (requires playwright)")
    parser.add_argument("--assets-dir", help="Directory with stylesheets/template overriding the bundled theme")
    parser.add_argument("--ca-bundle", help="Path to a custom CA certificate bundle for the photo lookup")
    parser.add_argument("--strict-photo", action="store_true", help="Fail the render if the photo cannot be classified")
    parser.add_argument("--no-photo", action="store_true", help="Skip the avatar and photo lookup entirely")
    parser.add_argument("--log-file", help="Also write DEBUG logs to this file")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase output verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress status output (ERROR only)")
    return parser


def main(argv=None):
    try:
        sys.exit(_main_cli(argv))
    except KeyboardInterrupt:
        sys.stderr.write("\n\033[31m[-] Cancelled by user\033[0m\n")
        sys.exit(130)


def _main_cli(argv=None) -> int:
    """
    Parses arguments, renders the resume and writes the outputs.
    Returns the process exit code.
    """
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, quiet=args.quiet, log_file=args.log_file)

    settings = ThemeSettings.from_env()
    if args.assets_dir:
        settings.assets_dir = Path(args.assets_dir)
    if args.strict_photo:
        settings.photo_failure = PHOTO_FAILURE_RAISE
    if args.ca_bundle:
        settings.ca_bundle = args.ca_bundle

    try:
        if args.resume == "-":
            resume = load_resume(sys.stdin.read())
        else:
            resume = load_resume(Path(args.resume))

        renderer = ThemeRenderer(settings=settings, photo_lookup=not args.no_photo)
        logger.info(f"Rendering {args.resume}")
        html = renderer.render(resume)
    except CVThemeError as e:
        logger.error(str(e))
        return 1

    output = Path(args.output)
    try:
        output.write_text(html, encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not write output {output}: {e}")
        return 1
    logger.info(f"HTML written to: {output}")

    if args.pdf:
        from cv_theme.pdf import export_pdf
        try:
            export_pdf(html, args.pdf)
        except CVThemeError as e:
            logger.error(str(e))
            return 1
        except OSError as e:
            logger.error(f"Could not write PDF {args.pdf}: {e}")
            return 1
        logger.info(f"PDF written to: {args.pdf}")

    return 0


if __name__ == "__main__":
    main()
