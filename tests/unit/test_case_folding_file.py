"""
Тесты для CaseFolding.txt parser

Coverage:
- Разбор статусов C / F / S / T
- Комментарии и пустые строки
- Построение FoldingTable (C+F) и TailoringTable (T) из файла
- Ошибки формата
"""

import pytest

from src.comparator import Comparator
from src.folding import (
    CaseFoldingStatus,
    FoldingTable,
    TailoringTable,
    parse_case_folding,
)

SAMPLE = """\
# CaseFolding-15.1.0.txt
# Status field: C, F, S, T

0041; C; 0061; # LATIN CAPITAL LETTER A
0049; C; 0069; # LATIN CAPITAL LETTER I
0053; C; 0073; # LATIN CAPITAL LETTER S
00DF; F; 0073 0073; # LATIN SMALL LETTER SHARP S
0049; T; 0131; # LATIN CAPITAL LETTER I
0130; F; 0069 0307; # LATIN CAPITAL LETTER I WITH DOT ABOVE
0130; T; 0069; # LATIN CAPITAL LETTER I WITH DOT ABOVE
1E9E; F; 0073 0073; # LATIN CAPITAL LETTER SHARP S
1E9E; S; 00DF; # LATIN CAPITAL LETTER SHARP S
"""


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "CaseFolding.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


class TestParseCaseFolding:
    """Тесты разбора строк"""

    def test_parses_all_entries(self) -> None:
        """Все строки с данными разобраны, комментарии пропущены"""
        entries = list(parse_case_folding(SAMPLE.splitlines()))

        assert len(entries) == 9
        assert entries[0].code_point == 0x41
        assert entries[0].status == CaseFoldingStatus.COMMON
        assert entries[0].mapping == (0x61,)

    def test_full_mapping(self) -> None:
        entries = list(parse_case_folding(["00DF; F; 0073 0073; # SHARP S"]))
        assert entries[0].status == CaseFoldingStatus.FULL
        assert entries[0].mapping == (0x73, 0x73)

    def test_unknown_status(self) -> None:
        with pytest.raises(ValueError, match="unknown status"):
            list(parse_case_folding(["0041; X; 0061;"]))

    def test_missing_fields(self) -> None:
        with pytest.raises(ValueError, match="expected 3 fields"):
            list(parse_case_folding(["0041; C"]))

    def test_overlong_mapping(self) -> None:
        with pytest.raises(ValueError, match="MAX_FOLD_EXPANSION"):
            list(parse_case_folding(["0041; F; 0061 0062 0063 0064;"]))

    def test_surrogate_code_point(self) -> None:
        with pytest.raises(ValueError):
            list(parse_case_folding(["D800; C; 0061;"]))


class TestTablesFromFile:
    """Тесты построения таблиц из файла"""

    def test_folding_table_uses_common_and_full(self, sample_file) -> None:
        """F побеждает S; T не попадает в дефолтную таблицу"""
        table = FoldingTable.from_case_folding_file(sample_file, unicode_version="15.1.0")

        assert table.lookup(0x1E9E) == (0x73, 0x73)
        assert table.lookup(0x49) == (0x69,)
        assert table.lookup(0x130) == (0x69, 0x307)
        assert table.unicode_version == "15.1.0"
        assert len(table) == 6

    def test_tailoring_table_uses_turkic(self, sample_file) -> None:
        table = TailoringTable.from_case_folding_file(sample_file)

        assert table.locales == ("az", "tr")
        assert table.lookup("tr", 0x49) == (0x131,)
        assert table.lookup("az", 0x130) == (0x69,)
        assert table.lookup("tr", 0x41) is None

    def test_comparator_with_file_tables(self, sample_file) -> None:
        """Comparator работает поверх таблиц из файла"""
        comparator = Comparator(
            folding_table=FoldingTable.from_case_folding_file(sample_file),
            tailoring_table=TailoringTable.from_case_folding_file(sample_file),
        )

        assert comparator.equals("ẞ", "ss")
        assert comparator.equals("I", "i")
        assert not comparator.equals("I", "i", "tr")
        assert comparator.equals("İ", "i", "tr")
