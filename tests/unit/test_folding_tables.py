"""
Тесты для FoldingTable, TailoringTable и registry

Coverage:
- Встроенная full case folding таблица (expansion 1..3)
- Identity fallback для code points без entry
- Турецкие/азербайджанские tailorings
- Разрешение тегов локали (fallback без ошибки)
- Build-once singletons
- Валидация entries
"""

import logging
import threading
import unicodedata
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.core.domain import MAX_FOLD_EXPANSION
from src.folding import (
    FoldingTable,
    TailoringTable,
    get_default_folding_table,
    get_default_tailoring_table,
    registry,
    resolver_for,
)


@pytest.fixture(scope="module")
def default_table():
    return get_default_folding_table()


class TestDefaultFoldingTable:
    """Тесты встроенной таблицы"""

    def test_simple_fold(self, default_table) -> None:
        assert default_table.lookup(ord("A")) == (ord("a"),)
        assert default_table.lookup(0x212A) == (ord("k"),)  # KELVIN SIGN

    def test_expansion_to_two(self, default_table) -> None:
        """ß → ss, ẞ → ss"""
        assert default_table.lookup(0xDF) == (0x73, 0x73)
        assert default_table.lookup(0x1E9E) == (0x73, 0x73)

    def test_expansion_to_three(self, default_table) -> None:
        """ﬃ → ffi, ΐ → ΐ"""
        assert default_table.lookup(0xFB03) == (0x66, 0x66, 0x69)
        assert default_table.lookup(0x390) == (0x3B9, 0x308, 0x301)

    def test_dotted_capital_i(self, default_table) -> None:
        """İ → i + COMBINING DOT ABOVE"""
        assert default_table.lookup(0x130) == (0x69, 0x307)

    def test_identity(self, default_table) -> None:
        """Без entry code point сворачивается сам в себя"""
        assert default_table.lookup(ord("a")) == (ord("a"),)
        assert default_table.get(ord("a")) is None
        assert 0x131 not in default_table  # dotless i
        assert default_table.lookup(0x10FFFF) == (0x10FFFF,)

    def test_max_expansion(self, default_table) -> None:
        assert default_table.max_expansion == MAX_FOLD_EXPANSION

    def test_unicode_version(self, default_table) -> None:
        assert default_table.unicode_version == unicodedata.unidata_version
        assert len(default_table) > 1000


class TestFoldingTableValidation:
    """Тесты валидации entries"""

    def test_identity_entries_dropped(self) -> None:
        table = FoldingTable({0x41: (0x41,), 0x42: (0x62,)})
        assert len(table) == 1
        assert 0x41 not in table

    def test_empty_sequence(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            FoldingTable({0x41: ()})

    def test_sequence_too_long(self) -> None:
        with pytest.raises(ValueError, match="MAX_FOLD_EXPANSION"):
            FoldingTable({0x41: (1, 2, 3, 4)})

    def test_surrogate_source(self) -> None:
        with pytest.raises(ValueError, match="scalar value"):
            FoldingTable({0xD800: (0x61,)})

    def test_non_int_target(self) -> None:
        with pytest.raises(TypeError):
            FoldingTable({0x41: ("a",)})


class TestTailoringTable:
    """Тесты встроенных tailorings"""

    def test_builtin_locales(self) -> None:
        table = get_default_tailoring_table()
        assert table.locales == ("az", "tr")
        assert len(table) == 4

    def test_turkic_overrides(self) -> None:
        table = get_default_tailoring_table()
        assert table.lookup("tr", 0x49) == (0x131,)
        assert table.lookup("tr", 0x130) == (0x69,)
        assert table.lookup("az", 0x49) == (0x131,)
        assert table.lookup("tr", 0x41) is None

    @pytest.mark.parametrize("tag", ["tr", "TR", "tr-TR", "tr_TR", "tr_TR.UTF-8", "tr-Latn-TR"])
    def test_resolve_locale_variants(self, tag) -> None:
        assert get_default_tailoring_table().resolve_locale(tag) == "tr"

    @pytest.mark.parametrize("tag", [None, "", "und", "root", "de", "en-US", "lt"])
    def test_resolve_locale_fallback(self, tag) -> None:
        """Неизвестная локаль - не ошибка, а fallback"""
        assert get_default_tailoring_table().resolve_locale(tag) is None

    def test_fallback_logged_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.folding.tailoring_table"):
            get_default_tailoring_table().resolve_locale("de-DE")
        assert "No tailoring for locale 'de-DE'" in caplog.text

    def test_contains(self) -> None:
        table = get_default_tailoring_table()
        assert "tr-TR" in table
        assert "de" not in table
        assert 42 not in table

    def test_default_locale_tailoring_rejected(self) -> None:
        with pytest.raises(ValueError, match="default locale"):
            TailoringTable({"und": {0x41: (0x61,)}})

    def test_empty(self) -> None:
        table = TailoringTable.empty()
        assert table.locales == ()
        assert table.resolve_locale("tr") is None


class TestRegistry:
    """Тесты build-once singletons и FoldResolver"""

    def test_singletons(self) -> None:
        assert get_default_folding_table() is get_default_folding_table()
        assert get_default_tailoring_table() is get_default_tailoring_table()

    def test_concurrent_access_returns_same_table(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as pool:
            tables = list(pool.map(lambda _: get_default_folding_table(), range(16)))
        assert all(table is tables[0] for table in tables)

    @pytest.mark.parametrize(
        "attribute, owner, factory, getter",
        [
            ("_default_folding_table", FoldingTable, "from_unicode_database", get_default_folding_table),
            ("_default_tailoring_table", TailoringTable, "builtin", get_default_tailoring_table),
        ],
        ids=["folding", "tailoring"],
    )
    def test_concurrent_first_calls_build_once(
        self, monkeypatch, attribute, owner, factory, getter
    ) -> None:
        """Первые вызовы из нескольких потоков одновременно - одно построение"""
        original = getattr(owner, factory)
        built = []
        n_threads = 8
        barrier = threading.Barrier(n_threads)

        def counting_factory():
            built.append(threading.get_ident())
            return original()

        monkeypatch.setattr(registry, attribute, None)
        monkeypatch.setattr(owner, factory, counting_factory)

        def first_call(_):
            barrier.wait()
            return getter()

        with ThreadPoolExecutor(max_workers=n_threads) as pool:
            tables = list(pool.map(first_call, range(n_threads)))

        assert len(built) == 1
        assert all(table is tables[0] for table in tables)
        assert getattr(registry, attribute) is tables[0]

    def test_resolver_prefers_tailoring(self) -> None:
        resolver = resolver_for("tr-TR")
        assert resolver.tailoring_key == "tr"
        assert resolver.locale == "tr-tr"
        assert resolver.resolve(0x49) == (0x131,)
        # Не переопределённые code points идут в дефолтную таблицу
        assert resolver.resolve(0xDF) == (0x73, 0x73)
        assert resolver.resolve(ord("a")) is None
        assert resolver.lookup(ord("a")) == (ord("a"),)

    def test_resolver_default(self) -> None:
        resolver = resolver_for(None)
        assert resolver.tailoring_key is None
        assert resolver.tailoring is None
        assert resolver.resolve(0x49) == (0x69,)

    def test_resolver_with_custom_tables(self) -> None:
        folding = FoldingTable({0x41: (0x61,)})
        resolver = resolver_for("tr", folding, TailoringTable.empty())
        assert resolver.tailoring_key is None
        assert resolver.resolve(0x41) == (0x61,)
        assert resolver.resolve(0xDF) is None
