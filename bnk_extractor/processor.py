# bnk_extractor/processor.py
from dataclasses import dataclass, field
from typing import Optional, List
import logging
from pathlib import Path

from .chunks.base import ChunkParsingError
from .extractor import ExtractionResult, extract_payloads, PAYLOAD_EXTENSION
from .parser import BankFileParser, BankSession
from .report import write_object_report, write_json_report
from .utils.db import DatabaseManager

logger = logging.getLogger(__name__)

@dataclass
class ExtractorConfig:
    """Switches controlling one extraction run."""
    swap_byte_order: bool = False
    dump_objects: bool = False
    json_report: bool = False
    output_dir: Optional[Path] = None
    db_path: Optional[Path] = None
    extension: str = PAYLOAD_EXTENSION
    show_progress: bool = False
    # Dialogue languages to carve, every known language when None
    languages: Optional[List[str]] = None

@dataclass
class BankResult:
    """Outcome of processing one bank file."""
    bank_path: Path
    output_dir: Optional[Path] = None
    session: Optional[BankSession] = None
    extraction: Optional[ExtractionResult] = None
    reports: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        if self.session is None or self.errors:
            return False
        return self.extraction is None or self.extraction.success

def default_output_dir(bank_path: Path) -> Path:
    """Sibling directory named after the bank file stem."""
    bank_path = Path(bank_path)
    return bank_path.with_name(bank_path.stem)

class BankProcessor:
    """Main SoundBank processor.

    Runs the decode pass, the optional reports and the extraction pass over
    one bank, keeping a single open handle for both passes.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None,
                 db_manager: Optional[DatabaseManager] = None):
        self.config = config or ExtractorConfig()
        self.db_manager = db_manager
        self.parser = BankFileParser(swap_byte_order=self.config.swap_byte_order)

    def process_file(self, bank_path: Path, output_dir: Optional[Path] = None) -> BankResult:
        """Decode a bank and extract its payloads.

        Args:
            bank_path: Bank file to process
            output_dir: Destination directory; falls back to the configured
                directory and then to a sibling directory named after the bank
        """
        bank_path = Path(bank_path)
        result = BankResult(bank_path=bank_path)
        logger.info(f"Processing {bank_path}")

        try:
            with open(bank_path, 'rb') as f:
                try:
                    session = self.parser.parse(f)
                except ChunkParsingError as e:
                    error_msg = f"Failed to decode {bank_path}: {e}"
                    logger.error(error_msg)
                    result.errors.append(error_msg)
                    return result

                result.session = session

                output_dir = Path(output_dir or self.config.output_dir or default_output_dir(bank_path))
                output_dir.mkdir(parents=True, exist_ok=True)
                result.output_dir = output_dir

                self._write_reports(session, result)

                result.extraction = extract_payloads(
                    f,
                    session,
                    output_dir,
                    swap_byte_order=self.config.swap_byte_order,
                    extension=self.config.extension,
                    show_progress=self.config.show_progress
                )

        except OSError as e:
            error_msg = f"Can't process {bank_path}: {e}"
            logger.error(error_msg)
            result.errors.append(error_msg)

        return result

    def _write_reports(self, session: BankSession, result: BankResult) -> None:
        """Write the requested reports; failures never stop extraction."""
        if self.config.dump_objects:
            report = write_object_report(session, result.output_dir)
            if report:
                result.reports.append(report)

        if self.config.json_report:
            report = write_json_report(session, result.output_dir, str(result.bank_path))
            if report:
                result.reports.append(report)

        if self.db_manager:
            try:
                self.db_manager.store_bank(result.bank_path.name, session)
            except Exception as e:
                logger.error(f"Database export failed for {result.bank_path}: {e}")
