import pytest
from rave.classify import can_split, humanize, is_dust, is_human, is_literal, is_void


@pytest.mark.parametrize(
	"value,expected",
	[
		("", True),
		("dj", True),
		(0, True),
		(1.5, True),
		(-7, True),
		([8], False),
		({"a": 1}, False),
		(None, False),
		(True, False),
		(False, False),
	],
)
def test_is_human(value, expected):
	assert is_human(value) is expected


def test_humanize():
	assert humanize(1000) == 1000
	assert humanize("dj") == "dj"
	assert humanize([8]) == ""
	assert humanize(None) == ""
	assert humanize(True) == ""
	assert humanize(0) == 0


@pytest.mark.parametrize(
	"value",
	["", "-", "Yy", 1000, 1.5, 0, True, False, [8], None],
)
def test_can_split_matches_is_human_except_empty(value):
	assert can_split(value) is (is_human(value) and value != "")


@pytest.mark.parametrize(
	"value,expected",
	[
		(",", True),
		(" , ", True),
		("--\t--", True),
		("\\s", True),
		("   ", True),
		("#!?", True),
		("", False),
		("a,", False),
		("1", False),
		(",é", False),
		(5, False),
		(None, False),
	],
)
def test_is_dust(value, expected):
	assert is_dust(value) is expected


@pytest.mark.parametrize(
	"value,expected",
	[
		("", True),
		("   \t\n", True),
		(0, True),
		(1000, True),
		(True, True),
		([], True),
		({}, True),
		(None, True),
		("a", False),
		("  a  ", False),
	],
)
def test_is_void(value, expected):
	assert is_void(value) is expected


@pytest.mark.parametrize(
	"value,expected",
	[
		(None, False),
		(0, True),
		("12.5", True),
		(True, True),
		(False, True),
		("true", True),
		(" null ", True),
		("'quoted'", True),
		("[1, 2]", True),
		("{}", True),
		("function(){}", True),
		("plain text", False),
		("", False),
		([1, 2], False),
	],
)
def test_is_literal(value, expected):
	assert is_literal(value) is expected
