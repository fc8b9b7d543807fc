"""Tests for the inflection engine's dispatch table and composition rules."""

import pytest
from concurrent.futures import ThreadPoolExecutor

from strinflect import CANONICAL_FLAGS, CANONICAL_ORDER, FlagName, InflectionEngine, transform
from strinflect.errors import ConfigurationError, UnknownFlagError
from strinflect.engine import build_pipeline, normalize_flags

from tests.test_utils import CANONICAL_FLAG_NAMES, FLAG_EXAMPLES, apply_flag


def test_canonical_order_is_fixed():
    assert [flag.value for flag in CANONICAL_FLAGS] == CANONICAL_FLAG_NAMES


def test_dispatch_table_covers_catalog_once():
    flags = [flag for flag, _ in CANONICAL_ORDER]
    assert len(flags) == len(set(flags))
    assert set(flags) == set(FlagName)


def test_custom_pipeline_keeps_canonical_order():
    pipeline = build_pipeline(".")
    assert tuple(flag for flag, _ in pipeline) == CANONICAL_FLAGS


@pytest.mark.parametrize("flag, text, expected", FLAG_EXAMPLES)
def test_documented_example(flag: FlagName, text: str, expected: str):
    assert apply_flag(text, flag) == expected


def test_camel_case_of_sentence():
    assert transform("this is a test", ["camel_case"]) == "thisIsATest"


def test_non_ascii_words():
    assert transform("café", ["pluralize"]) == "cafés"
    assert transform("Café", {"table_case"}) == "cafés"
    assert transform("cafés", {"class_case"}) == "Café"


# --- Composition ---

def test_request_order_is_irrelevant():
    forward = transform("ProductImages", ["snake_case", "upper_case"])
    backward = transform("ProductImages", ["upper_case", "snake_case"])
    assert forward == backward == "PRODUCT_IMAGES"


def test_flags_apply_in_table_order():
    # snake_case (step 3) runs after camel_case (step 1)
    assert transform("product images", ["snake_case", "camel_case"]) == "product_images"
    # singularize (17) runs after sentence_case (7), lower_case (19) last
    result = transform("product_descriptions", {"to_lower_case", "to_singular", "to_sentence_case"})
    assert result == "product description"


def test_demodulize_then_class_case():
    assert transform("Bars::Foos", {"demodulize", "class_case"}) == "Foo"


def test_deconstantize_then_singularize():
    """Nested call from the helper docs: 'Bars::Foos' -> 'Bars' -> 'Bar'."""
    assert transform(transform("Bars::Foos", ["deconstantize"]), ["singularize"]) == "Bar"


def test_duplicate_flags_apply_once():
    assert transform("July 1", ["ordinalize", "ordinalize"]) == "July 1st"
    assert transform("July 1", [FlagName.ORDINALIZE, "to_ordinalize"]) == "July 1st"


def test_no_flags_returns_input():
    assert transform("Product Images", []) == "Product Images"
    assert transform("Product Images", None) == "Product Images"


def test_single_flag_name_accepted():
    assert transform("ProductImages", "snake_case") == "product_images"
    assert transform("ProductImages", FlagName.KEBAB_CASE) == "product-images"


def test_option_spellings_accepted():
    assert transform("tests", ["to_singular"]) == "test"
    assert transform("test", ["to_plural"]) == "tests"
    assert transform("ProductImage", ["to_table_case"]) == "product_images"


def test_unknown_flag_raises():
    with pytest.raises(UnknownFlagError) as exc_info:
        transform("anything", ["snake_case", "shout"])
    assert "shout" in str(exc_info.value)


@pytest.mark.parametrize("flag", list(FlagName))
def test_empty_string_under_every_flag(flag: FlagName):
    assert apply_flag("", flag) == ""


def test_empty_string_under_all_flags():
    assert transform("", list(FlagName)) == ""


def test_all_flags_together_is_deterministic():
    first = transform("Admin::ProductImages 3", list(FlagName))
    second = transform("Admin::ProductImages 3", list(reversed(list(FlagName))))
    assert first == second


def test_normalize_flags():
    assert normalize_flags(None) == frozenset()
    assert normalize_flags(["to_snake_case", "snake_case"]) == frozenset({FlagName.SNAKE_CASE})


# --- Engine configuration ---

def test_engine_with_custom_separator():
    engine = InflectionEngine(".")
    assert engine.transform("app.models.users", {"demodulize", "class_case"}) == "User"
    assert engine.transform("app.models.users", {"deconstantize"}) == "App.Models"
    assert engine.transform("app.models.Users", {"to_foreign_key"}) == "user_id"


def test_transform_with_custom_separator():
    assert transform("app.models.user", ["demodulize"], namespace_separator=".") == "User"
    # The default engine is not affected
    assert transform("app.models.user", ["demodulize"]) == "app.models.user"


@pytest.mark.parametrize("separator", ["", None, 3])
def test_engine_rejects_invalid_separator(separator):
    with pytest.raises(ConfigurationError):
        InflectionEngine(separator)


def test_engine_is_safe_to_share_between_threads():
    engine = InflectionEngine()
    inputs = [f"product_images_{i}" for i in range(200)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda text: engine.transform(text, {"pascal_case"}), inputs))
    assert results == [f"ProductImages{i}" for i in range(200)]
