import uuid
from pathlib import Path
from typing import Union


def check_directory(output_folder: Union[Path, str]) -> Path:
    """Create the output folder if it does not exist and return it as a Path."""
    folder = Path(output_folder)
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def create_uuid_filename(prefix: str, extension: str) -> str:
    """Build a unique file name such as 'pg-1f2e....pg.parquet'."""
    return f"{prefix}-{uuid.uuid4()}{extension}"
