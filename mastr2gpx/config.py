import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Tuple

from dotenv import load_dotenv

from .core.constants import DEFAULT_OUTPUT, DUMP_FILE_PREFIX
from .core.types import RecordFilter
from .pipeline.filters import PostalCodeFilter, parse_bounding_box

# 環境変数の読み込み
ENV = os.getenv("ENV", os.getenv("PYTHON_ENV", "development"))


def load_environment(env: str = ENV) -> Optional[str]:
    """
    Load variables from a .env file, if one exists.

    ``.env.<env>`` is preferred, ``.env`` is the fallback. Variables already
    set in the process environment are not overridden.

    Returns:
        Name of the loaded file, or None
    """
    for env_file in (f".env.{env}", ".env"):
        if os.path.exists(env_file):
            load_dotenv(env_file)
            return env_file
    return None


load_environment()

# 設定値
DEFAULT_OUTPUT_PATH = os.getenv("MASTR2GPX_OUTPUT", DEFAULT_OUTPUT)
DEFAULT_DUMP_FILE_PREFIX = os.getenv("MASTR2GPX_FILE_PREFIX", DUMP_FILE_PREFIX)


@dataclass(frozen=True)
class ExportConfig:
    """
    Settings of one export run, fixed before any file is read.

    Attributes:
        output_path: GPX file to write
        filters: Filters every kept generator must pass
        file_prefix: Name prefix of the dump files to read
        debug: Enable debug logging in scanner and pipeline
    """
    output_path: Path = Path(DEFAULT_OUTPUT_PATH)
    filters: Tuple[RecordFilter, ...] = field(default_factory=tuple)
    file_prefix: str = DEFAULT_DUMP_FILE_PREFIX
    debug: bool = False


def build_export_config(
    output: Optional[str] = None,
    postal_codes: Iterable[str] = (),
    bbox: Optional[str] = None,
    file_prefix: Optional[str] = None,
    debug: bool = False,
) -> ExportConfig:
    """
    Build the export configuration from user input.

    Args:
        output: GPX output path (None = environment default)
        postal_codes: Postal codes, each added as an exact-match filter
        bbox: Bounding box as "left,bottom,right,top" (None = no box)
        file_prefix: Dump file name prefix (None = environment default)
        debug: Enable debug logging

    Raises:
        ConfigurationError: if the bounding box is malformed
    """
    filters = [PostalCodeFilter(postal_code=code) for code in postal_codes]
    if bbox is not None:
        filters.append(parse_bounding_box(bbox))

    return ExportConfig(
        output_path=Path(output or DEFAULT_OUTPUT_PATH),
        filters=tuple(filters),
        file_prefix=file_prefix or DEFAULT_DUMP_FILE_PREFIX,
        debug=debug,
    )
