"""
CaseFolding.txt parser

Разбор файла Unicode Character Database CaseFolding.txt:

    <code>; <status>; <mapping>; # <name>

Статусы:
- C: common - общие для simple и full folding
- F: full - mapping в несколько code points (ß → ss)
- S: simple - 1:1 альтернатива для F (не используется full folding)
- T: turkic - особые mappings для tr/az, заменяют C/F для I и İ
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Union

from src.core.domain.code_point import FoldSequence, parse_code_point, validate_fold_sequence


class CaseFoldingStatus(str, Enum):
    """Статус строки CaseFolding.txt."""

    COMMON = "C"
    FULL = "F"
    SIMPLE = "S"
    TURKIC = "T"


# Статусы, составляющие full case folding
FULL_FOLDING_STATUSES = frozenset({CaseFoldingStatus.COMMON, CaseFoldingStatus.FULL})


@dataclass(frozen=True)
class CaseFoldingEntry:
    """Одна строка CaseFolding.txt."""

    code_point: int
    status: CaseFoldingStatus
    mapping: FoldSequence


def parse_case_folding(lines: Iterable[str]) -> Iterator[CaseFoldingEntry]:
    """
    Разбор строк CaseFolding.txt.

    Комментарии (#...) и пустые строки пропускаются.

    Raises:
        ValueError: Если строка не соответствует формату
    """
    for line_number, line in enumerate(lines, start=1):
        comment_off = line.find("#")
        if comment_off >= 0:
            line = line[:comment_off]
        line = line.strip()
        if not line:
            continue

        fields = [field.strip() for field in line.split(";")]
        if len(fields) < 3:
            raise ValueError(f"CaseFolding line {line_number}: expected 3 fields, got {line!r}")

        raw_code_point, raw_status, raw_mapping = fields[:3]
        try:
            status = CaseFoldingStatus(raw_status)
        except ValueError:
            raise ValueError(f"CaseFolding line {line_number}: unknown status {raw_status!r}")

        yield CaseFoldingEntry(
            code_point=parse_code_point(raw_code_point),
            status=status,
            mapping=validate_fold_sequence(
                (parse_code_point(item) for item in raw_mapping.split()),
                f"CaseFolding line {line_number}",
            ),
        )


def read_case_folding_file(path: Union[str, Path]) -> Iterator[CaseFoldingEntry]:
    """Ленивое чтение CaseFolding.txt с диска."""
    with open(path, "r", encoding="utf-8") as f:
        yield from parse_case_folding(f)
