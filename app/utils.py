import re
from logging import getLogger

logger = getLogger(__name__)

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

# ascii digits only, no whitespace or '_' separators
_INT_PATTERN = re.compile(r'[+-]?[0-9]+')

def generate_book_code(existing_count: int) -> str:
    return f'B{existing_count + 1:05d}'

def string_to_int(value: str) -> int:
    if not _INT_PATTERN.fullmatch(value):
        logger.warning(f'Invalid integer: {value!r}')
        raise ValueError(f'parsing "{value}": invalid syntax')
    number = int(value, 10)
    if not INT64_MIN <= number <= INT64_MAX:
        logger.warning(f'Integer out of range: {value!r}')
        raise ValueError(f'parsing "{value}": value out of range')
    return number
