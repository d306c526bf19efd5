# bnk_extractor/main.py
import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

from .archive import carve_banks, carve_dialogue
from .processor import BankProcessor, BankResult, ExtractorConfig
from .utils.db import DatabaseManager
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

def carve_root(input_path: Path, config: ExtractorConfig) -> Path:
    """Directory receiving everything carved out of an archive."""
    return config.output_dir or input_path.with_name(f"{input_path.stem}_banks")

def collect_bank_files(input_path: Path, config: ExtractorConfig, carve: bool = False) -> List[Path]:
    """Resolve the input argument into the list of banks to process."""
    if carve:
        return carve_banks(input_path, carve_root(input_path, config) / 'banks')
    if input_path.is_dir():
        return sorted(input_path.glob('*.bnk'))
    return [input_path]

def process_bank_files(
    bank_files: List[Path],
    config: ExtractorConfig,
    db_manager: Optional[DatabaseManager] = None
) -> List[BankResult]:
    """Process every bank; one failing bank does not stop the others.

    With several banks and an output override, each bank gets its own
    ``<output>/<stem>`` directory.
    """
    processor = BankProcessor(config, db_manager)
    results = []

    for bank_file in bank_files:
        output_dir = None
        if config.output_dir and len(bank_files) > 1:
            output_dir = config.output_dir / bank_file.stem

        try:
            results.append(processor.process_file(bank_file, output_dir))
        except Exception as e:
            logger.error(f"Failed to process {bank_file}: {e}")
            if logger.isEnabledFor(logging.DEBUG):
                logger.exception("Detailed error:")
            results.append(BankResult(bank_path=bank_file, errors=[str(e)]))

    return results

def parse_languages(value: Optional[str]) -> Optional[List[str]]:
    if not value:
        return None
    return [code.strip().upper() for code in value.split(',') if code.strip()]

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Extract embedded WEM payloads from Wwise SoundBank (.bnk) files'
    )
    parser.add_argument('input',
                       help='Bank file, directory of bank files, or game archive with --carve')
    parser.add_argument('--output', '-o',
                       help='Output directory (default: directory named after the bank)')
    parser.add_argument('--swap-byte-order',
                       action='store_true',
                       help='Invert byte order of chunk lengths and index offsets/sizes')
    parser.add_argument('--dump-objects',
                       action='store_true',
                       help='Write hierarchy objects to objects.txt')
    parser.add_argument('--json',
                       action='store_true',
                       help='Write the decoded bank to objects.json')
    parser.add_argument('--db-path',
                       help='Also store decoded banks in this SQLite database')
    parser.add_argument('--carve',
                       action='store_true',
                       help='Treat input as a game archive and carve banks and dialogue out of it first')
    parser.add_argument('--languages',
                       help='Comma separated dialogue languages to carve, e.g. ENG,FRE (default: all)')
    parser.add_argument('--log-dir',
                       help='Directory for log files (default: console only)')
    parser.add_argument('--no-progress',
                       action='store_true',
                       help='Disable the extraction progress bar')
    parser.add_argument('--verbose', '-v',
                       action='store_true',
                       help='Enable verbose logging')
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    # Convert paths
    input_path = Path(args.input)
    config = ExtractorConfig(
        swap_byte_order=args.swap_byte_order,
        dump_objects=args.dump_objects,
        json_report=args.json,
        output_dir=Path(args.output) if args.output else None,
        db_path=Path(args.db_path) if args.db_path else None,
        show_progress=not args.no_progress,
        languages=parse_languages(args.languages)
    )

    # Validate paths
    if not input_path.exists():
        logger.error(f"Can't open input file: {input_path}")
        return 1
    if args.carve and not input_path.is_file():
        logger.error(f"Archive not found: {input_path}")
        return 1

    db_manager = None
    try:
        bank_files = collect_bank_files(input_path, config, args.carve)
        if args.carve:
            carve_dialogue(input_path, carve_root(input_path, config), config.languages)

        if not bank_files:
            logger.warning(f"No bank files found in {input_path}")
            return 0

        if config.db_path:
            db_manager = DatabaseManager(config.db_path)
            db_manager.initialize()

        results = process_bank_files(bank_files, config, db_manager)

    except Exception as e:
        logger.error(f"Processing failed: {e}")
        if logger.isEnabledFor(logging.DEBUG):
            logger.exception("Detailed error:")
        return 1

    finally:
        # Close database connection if it was opened
        if db_manager:
            db_manager.close()

    failed = [r for r in results if not r.success]
    logger.info(f"Processed {len(results)} banks, {len(failed)} with errors")
    return 1 if failed else 0

if __name__ == "__main__":
    sys.exit(main())
