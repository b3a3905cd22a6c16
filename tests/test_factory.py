"""Tests for Factory: locale resolution, registry and seeding."""

from __future__ import annotations

import inspect
import threading
from datetime import datetime
from typing import Any

import pytest
from hypothesis import given
from strategies import seeds, unknown_locales

from klaw_faker import Factory, Generator, InvalidLocaleError, fake, init

# Runtime checks for each return annotation used by Generator methods.
RUNTIME_TYPES: dict[str, tuple[type, ...]] = {
    'str': (str,),
    'str | None': (str, type(None)),
    'int': (int,),
    'bool': (bool,),
    'float': (float,),
    'builtins.float': (float,),
    'datetime': (datetime,),
    'list[str]': (list,),
    'list[int]': (list,),
    'list[float]': (list,),
    'list[str] | str | None': (list, str, type(None)),
}
LIST_ITEM_TYPES: dict[str, type] = {'list[str]': str, 'list[int]': int, 'list[float]': float}

UNSUPPORTED = {
    (locale, name)
    for locale in ('en_PH', 'fil_PH', 'tl_PH')
    for name in ('phone_number', 'msisdn', 'country_calling_code')
}


def _zero_arg_methods() -> list[tuple[str, str]]:
    """Public, non-deprecated Generator methods callable without arguments."""
    methods = []
    for name, func in inspect.getmembers(Generator, inspect.isfunction):
        if name.startswith('_') or name == 'seed' or hasattr(func, '__deprecated__'):
            continue
        signature = inspect.signature(func)
        params = list(signature.parameters.values())[1:]
        if all(p.default is not inspect.Parameter.empty for p in params):
            methods.append((name, signature.return_annotation))
    return methods


ZERO_ARG_METHODS = _zero_arg_methods()


def _matches(value: Any, annotation: str) -> bool:
    if not isinstance(value, RUNTIME_TYPES[annotation]):
        return False
    item_type = LIST_ITEM_TYPES.get(annotation)
    return item_type is None or all(isinstance(item, item_type) for item in value)


class TestMake:
    """Tests for Factory.make() and its registry."""

    def test_default_locale(self) -> None:
        gen = Factory.make()
        assert isinstance(gen, Generator)
        assert gen.locale == 'en_US'

    def test_explicit_locale(self) -> None:
        assert Factory.make('fr_FR').locale == 'fr_FR'

    def test_same_locale_returns_same_instance(self) -> None:
        assert Factory.make('de_DE') is Factory.make('de_DE')

    def test_different_locales_get_different_engines(self) -> None:
        de = Factory.make('de_DE')
        fr = Factory.make('fr_FR')
        assert de is not fr
        assert de.faker is not fr.faker

    def test_hyphenated_locale_shares_registry_entry(self) -> None:
        """'pt-BR' and 'pt_BR' name the same locale."""
        assert Factory.make('pt-BR') is Factory.make('pt_BR')

    @pytest.mark.parametrize(
        ('bare', 'expanded'),
        [('de', 'de_DE'), ('en', 'en_US'), ('es', 'es_ES'), ('th', 'th_TH')],
    )
    def test_bare_language_expands(self, bare: str, expanded: str) -> None:
        """Faker expands bare languages when it builds an engine, so the registry does too."""
        assert bare in Factory.locales()
        assert Factory.make(bare).locale == expanded
        assert Factory.make(bare) is Factory.make(expanded)

    def test_default_locale_from_config(self) -> None:
        init(default_locale='it_IT')
        assert Factory.make().locale == 'it_IT'

    def test_default_locale_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('KLAW_FAKER_LOCALE', 'es_ES')
        assert Factory.make().locale == 'es_ES'

    def test_concurrent_first_requests_build_one_engine(self) -> None:
        results: list[Generator] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(Factory.make('nl_NL'))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)


class TestInvalidLocale:
    """Unknown locales fail before any generator is built."""

    @given(locale=unknown_locales)
    def test_unknown_locale_raises(self, locale: str) -> None:
        with pytest.raises(InvalidLocaleError) as exc_info:
            Factory.make(locale)
        assert exc_info.value.locale == locale

    def test_empty_locale_raises(self) -> None:
        with pytest.raises(InvalidLocaleError):
            Factory.make('')

    def test_whitespace_locale_raises(self) -> None:
        with pytest.raises(InvalidLocaleError):
            Factory.create('   ')

    def test_non_string_locale_raises(self) -> None:
        with pytest.raises(InvalidLocaleError):
            Factory.make(42)  # type: ignore[arg-type]

    def test_nothing_cached_after_failure(self) -> None:
        with pytest.raises(InvalidLocaleError):
            Factory.make('xx_XX')
        assert Factory._registry == {}

    def test_error_lists_available_locales(self) -> None:
        with pytest.raises(InvalidLocaleError) as exc_info:
            Factory.make('xx_XX')
        assert 'en_US' in exc_info.value.available


class TestAllLocales:
    """Every supported locale builds a working generator."""

    @pytest.mark.parametrize('locale', Factory.locales())
    def test_every_method_returns_its_declared_type(self, locale: str) -> None:
        gen = Factory.make(locale)
        for name, annotation in ZERO_ARG_METHODS:
            try:
                value = getattr(gen, name)()
            except AttributeError:
                # Faker has no provider for these in the Philippine locales.
                assert (locale, name) in UNSUPPORTED, f'{locale}: {name}'
                continue
            assert _matches(value, annotation), f'{locale}: {name}() returned {value!r}, declared {annotation}'

    def test_method_table_covers_every_group(self) -> None:
        names = {name for name, _ in ZERO_ARG_METHODS}
        assert {'city', 'ean13', 'float', 'words', 'semver', 'date_time', 'local_coordinates'} <= names
        assert 'random_float' not in names
        assert 'seed' not in names

    def test_locales_are_sorted_and_include_default(self) -> None:
        available = Factory.locales()
        assert list(available) == sorted(available)
        assert 'en_US' in available


class TestCreate:
    """Tests for Factory.create()."""

    def test_create_bypasses_registry(self) -> None:
        assert Factory.create('en_US') is not Factory.make('en_US')
        assert Factory.create('en_US') is not Factory.create('en_US')

    @given(seed=seeds)
    def test_same_seed_same_stream(self, seed: int) -> None:
        a = Factory.create('en_US', seed=seed)
        b = Factory.create('en_US', seed=seed)
        assert [a.name(), a.city(), a.float(3, 0, 1)] == [b.name(), b.city(), b.float(3, 0, 1)]

    def test_config_seed_applies(self) -> None:
        init(seed=99)
        assert Factory.create().name() == Factory.create().name()

    def test_explicit_seed_overrides_config(self) -> None:
        init(seed=99)
        assert Factory.create(seed=5).md5() == Factory.create(seed=5).md5()
        assert Factory.create(seed=5).md5() != Factory.create(seed=6).md5()

    def test_engines_do_not_share_random_state(self) -> None:
        """Drawing from one generator does not shift another's stream."""
        a = Factory.create('en_US', seed=1)
        b = Factory.create('en_US', seed=1)
        other = Factory.create('en_US', seed=1)
        for _ in range(10):
            other.sha256()
        assert a.sha256() == b.sha256()


class TestRegistryLifecycle:
    """Tests for forget() and clear()."""

    def test_forget_drops_entry(self) -> None:
        first = Factory.make('ja_JP')
        assert Factory.forget('ja_JP') is True
        assert Factory.make('ja_JP') is not first

    def test_forget_unknown_entry(self) -> None:
        assert Factory.forget('ja_JP') is False

    def test_forget_invalid_locale_raises(self) -> None:
        with pytest.raises(InvalidLocaleError):
            Factory.forget('xx_XX')

    def test_clear(self) -> None:
        first = Factory.make('en_GB')
        Factory.clear()
        assert Factory.make('en_GB') is not first


class TestFakeShortcut:
    """fake() is Factory.make()."""

    def test_fake_uses_registry(self) -> None:
        assert fake() is Factory.make()
        assert fake('sv_SE') is Factory.make('sv_SE')

    def test_fake_invalid_locale(self) -> None:
        with pytest.raises(InvalidLocaleError):
            fake('xx_XX')
