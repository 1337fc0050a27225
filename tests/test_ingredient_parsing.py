import pytest

from kitchen_utils.ingredients.number_utils import (
    _is_quantity_token,
    _split_quantity_prefix,
    resolve_quantity_token,
)
from kitchen_utils.ingredients.parsing import (
    _parse_unit,
    _split_quantity_run,
    parse_ingredient,
    parse_quantity_text,
)
from kitchen_utils.ingredients.units import is_unit, normalize_unit, pluralize_unit


@pytest.mark.parametrize(
    "token, expected",
    [
        ("½", 0.5),
        ("⅓", 1 / 3),
        ("⅞", 0.875),
        ("1/2", 0.5),
        ("3/4", 0.75),
        ("2", 2.0),
        ("2.5", 2.5),
        (".5", 0.5),
        ("1½", 1.5),
        ("2¾", 2.75),
        ("1/2/3", None),
        ("1.2.3", None),
    ],
)
def test_resolve_quantity_token(token, expected):
    """Test resolution of single quantity tokens."""
    result = resolve_quantity_token(token)
    if expected is None:
        assert result is None
    else:
        assert result == pytest.approx(expected)


def test_resolve_quantity_token_zero_denominator():
    with pytest.raises(ZeroDivisionError):
        resolve_quantity_token("1/0")


@pytest.mark.parametrize(
    "token, expected",
    [
        ("1", True),
        ("1/2", True),
        ("½", True),
        ("1½", True),
        ("2.5", True),
        ("/", False),
        (".", False),
        ("cups", False),
        ("2-3", False),
        ("", False),
    ],
)
def test_is_quantity_token(token, expected):
    assert _is_quantity_token(token) == expected


def test_split_quantity_prefix():
    assert _split_quantity_prefix("12oz") == ("12", "oz")
    assert _split_quantity_prefix("flour") == ("", "flour")


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("1 1/2", 1.5),
        ("2 ½", 2.5),
        ("1½", 1.5),
        ("3", 3.0),
        ("1/0", None),
        ("1/0 2", 2.0),
        ("0", None),
        ("0 0/4", None),
        ("", None),
    ],
)
def test_parse_quantity_text(input_text, expected):
    """Test that quantity runs are summed and zero totals become None."""
    result = parse_quantity_text(input_text)
    if expected is None:
        assert result is None
    else:
        assert result == pytest.approx(expected)


@pytest.mark.parametrize(
    "words, expected_quantity, expected_rest",
    [
        (["1", "1/2", "cups", "flour"], ["1", "1/2"], ["cups", "flour"]),
        (["12oz", "steak"], ["12"], ["oz", "steak"]),
        (["1/2cup", "milk"], ["1/2"], ["cup", "milk"]),
        (["7up", "soda"], [], ["7up", "soda"]),
        (["Salt", "to", "taste"], [], ["Salt", "to", "taste"]),
        ([], [], []),
    ],
)
def test_split_quantity_run(words, expected_quantity, expected_rest):
    """Test the private helper _split_quantity_run."""
    quantity_words, rest = _split_quantity_run(words)
    assert quantity_words == expected_quantity
    assert rest == expected_rest


@pytest.mark.parametrize(
    "words, expected_unit, expected_rest",
    [
        (["cups", "flour"], "cups", ["flour"]),
        (["Tbsp.", "butter"], "Tbsp", ["butter"]),
        (["large", "eggs"], "large", ["eggs"]),
        (["lemon"], None, ["lemon"]),
        (["leaves", "basil"], None, ["leaves", "basil"]),
        ([], None, []),
    ],
)
def test_parse_unit(words, expected_unit, expected_rest):
    """Test the private helper _parse_unit."""
    unit, rest = _parse_unit(words)
    assert unit == expected_unit
    assert rest == expected_rest


@pytest.mark.parametrize(
    "input_text, expected_amt, expected_unit, expected_name",
    [
        # Basic cases with amount, unit, and ingredient
        ("1 1/2 cups flour", 1.5, "cups", "flour"),
        ("2 large eggs", 2.0, "large", "eggs"),
        ("1 cup flour", 1.0, "cup", "flour"),
        ("2.5 ml vanilla extract", 2.5, "ml", "vanilla extract"),
        ("3 cloves garlic, minced", 3.0, "cloves", "garlic, minced"),
        ("1 pinch salt", 1.0, "pinch", "salt"),
        ("2 dashes hot sauce", 2.0, "dashes", "hot sauce"),
        ("1 lb ground beef", 1.0, "lb", "ground beef"),
        ("500 g pasta", 500.0, "g", "pasta"),
        # Unicode fractions
        ("½ teaspoon salt", 0.5, "teaspoon", "salt"),
        ("1½ cups milk", 1.5, "cups", "milk"),
        ("1 ½ cups milk", 1.5, "cups", "milk"),
        ("⅔ cup sugar", 2 / 3, "cup", "sugar"),
        ("⅛ tsp cayenne", 0.125, "tsp", "cayenne"),
        # Units are matched case-insensitively and kept as written
        ("2 Tbsp olive oil", 2.0, "Tbsp", "olive oil"),
        ("1 CUP rice", 1.0, "CUP", "rice"),
        # Quantity glued to the unit
        ("12oz steak", 12.0, "oz", "steak"),
        # No unit
        ("2 lemons", 2.0, None, "lemons"),
        ("1 lemon", 1.0, None, "lemon"),
        ("4 leaves basil", 4.0, None, "leaves basil"),
        # No quantity
        ("Salt, to taste", None, None, "Salt, to taste"),
        ("Salt to taste", None, None, "Salt to taste"),
        ("Fresh mint leaves", None, None, "Fresh mint leaves"),
        ("Large eggs", None, "Large", "eggs"),
        # Zero and broken quantities are parse misses
        ("0 cups sugar", None, "cups", "sugar"),
        ("1/0 cup water", None, "cup", "water"),
        ("2-3 cups stock", None, None, "2-3 cups stock"),
        # Whitespace
        ("   2   cups   flour  ", 2.0, "cups", "flour"),
    ],
)
def test_parse_ingredient(input_text, expected_amt, expected_unit, expected_name):
    """Test the main parse_ingredient function with various input formats."""
    parsed = parse_ingredient(input_text)

    if expected_amt is None:
        assert parsed.quantity is None
    else:
        assert parsed.quantity == pytest.approx(expected_amt)

    assert parsed.unit == expected_unit
    assert parsed.name == expected_name


def test_parse_ingredient_keeps_quantity_text():
    parsed = parse_ingredient("1 1/2 cups flour")
    assert parsed.quantity_text == "1 1/2"

    parsed = parse_ingredient("0 cups sugar")
    assert parsed.quantity_text == "0"
    assert parsed.quantity is None

    assert parse_ingredient("Salt to taste").quantity_text is None


@pytest.mark.parametrize(
    "input_text, expected_name",
    [
        ("2 cups", "cups"),
        ("Small", "Small"),
        ("2", "2"),
        ("3 ½", "3 ½"),
    ],
)
def test_parse_ingredient_never_returns_empty_name(input_text, expected_name):
    """Test that a unit or quantity with nothing after it stays in the name."""
    parsed = parse_ingredient(input_text)
    assert parsed.name == expected_name
    assert parsed.unit is None


def test_parse_ingredient_number_without_name_has_no_quantity():
    assert parse_ingredient("2").quantity is None


@pytest.mark.parametrize("input_text", ["", "   "])
def test_parse_ingredient_empty(input_text):
    parsed = parse_ingredient(input_text)
    assert parsed.quantity is None
    assert parsed.unit is None
    assert parsed.name == ""


@pytest.mark.parametrize(
    "word, expected",
    [
        ("cup", True),
        ("Cups", True),
        ("tbsp.", True),
        ("pinches", True),
        ("medium", True),
        ("leaves", False),
        ("lemon", False),
        ("", False),
    ],
)
def test_is_unit(word, expected):
    assert is_unit(word) == expected


@pytest.mark.parametrize(
    "input_unit, expected_unit",
    [
        ("cups", "cup"),
        ("Tbsp.", "tablespoon"),
        ("lbs", "pound"),
        ("g", "gram"),
        ("large", "large"),
        ("handful", "handful"),
    ],
)
def test_normalize_unit(input_unit, expected_unit):
    """Test unit normalization."""
    assert normalize_unit(input_unit) == expected_unit


@pytest.mark.parametrize(
    "unit, quantity, expected",
    [
        ("cup", 3, "cups"),
        ("cups", 3, "cups"),
        ("cups", 1, "cup"),
        ("cups", 0.5, "cup"),
        ("cup", 0.5, "cup"),
        ("Cup", 2, "Cups"),
        ("pinch", 2, "pinches"),
        ("pinches", 1, "pinch"),
        ("dashes", 0.5, "dash"),
        ("bunch", 4, "bunches"),
        ("tbsp", 2, "tbsp"),
        ("tbsps", 1, "tbsp"),
        ("lbs", 0.5, "lb"),
        ("large", 4, "large"),
        ("oz", 0.5, "oz"),
        # Unknown plurals only lose their trailing "s"
        ("packages", 1, "package"),
        ("heads", 0.5, "head"),
    ],
)
def test_pluralize_unit(unit, quantity, expected):
    assert pluralize_unit(unit, quantity) == expected
