"""
Normalization happens once, before any validator sees the data.
"""
from fieldcheck.config import ValidationOptions
from fieldcheck.model import Record
from fieldcheck.validation.core.types import validation_logger


def normalize_record(record: Record, options: ValidationOptions) -> Record:
    """
    Applies the normalization steps enabled in the options to the record in place and returns it.
    Currently the only step is trimming: leading and trailing whitespace is stripped from every string value.
    Non-string values are left untouched.
    """
    if options.trim:
        trimmed_fields = 0
        for field, value in record.items():
            if isinstance(value, str):
                stripped = value.strip()
                if stripped != value:
                    record[field] = stripped
                    trimmed_fields += 1
        validation_logger.debug("Trimmed whitespace of %i field(s)", trimmed_fields)
    return record
