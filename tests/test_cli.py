import pytest
from rave.cli.cmd import cli
from rave.env import ENV_RAVE_GROUPING, ENV_RAVE_INDENT, ENV_RAVE_QUOTE_STYLE
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	for key in (ENV_RAVE_GROUPING, ENV_RAVE_INDENT, ENV_RAVE_QUOTE_STYLE):
		monkeypatch.delenv(key, raising=False)


def test_quote():
	result = runner.invoke(cli, ["quote", "hello"])
	assert result.exit_code == 0
	assert result.stdout == '"hello"\n'


def test_quote_from_stdin():
	result = runner.invoke(cli, ["quote", "-q", "'"], input="hello\n")
	assert result.exit_code == 0
	assert result.stdout == "'hello'\n"


def test_unquote():
	result = runner.invoke(cli, ["unquote", '["a", "1"]'])
	assert result.stdout == '["a", 1]\n'


def test_unfold_uses_env_indent(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.setenv(ENV_RAVE_INDENT, "  ")
	result = runner.invoke(cli, ["unfold", "['a','b']"])
	assert result.exit_code == 0
	assert result.stdout == "\n['a',\n    'b']\n\n"


def test_cdata():
	result = runner.invoke(cli, ["cdata", "go();", "--indent", ""])
	assert result.stdout == "/*<![CDATA[*/\ngo();\n/*]]>*/\n"


def test_sanitize():
	result = runner.invoke(cli, ["sanitize", "Hello   World!!"])
	assert result.stdout == "hello-world\n"
	result = runner.invoke(cli, ["sanitize", "Hello World", "--keep-case", "--space", "_"])
	assert result.stdout == "Hello_World\n"


def test_var_name():
	result = runner.invoke(cli, ["var-name", "data key", "--camel"])
	assert result.stdout == "dataKey\n"


def test_var_name_rejects_blank():
	result = runner.invoke(cli, ["var-name", "   "])
	assert result.exit_code == 1


def test_to_js():
	result = runner.invoke(cli, ["to-js", '{"a": [1, "x"]}', "-g", "{["])
	assert result.exit_code == 0
	assert result.stdout == '{a: [1, "x"]}\n'


def test_to_js_env_defaults(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.setenv(ENV_RAVE_QUOTE_STYLE, "1")
	result = runner.invoke(cli, ["to-js", '["x", true]'])
	assert result.stdout == "['x', true]\n"


def test_to_js_invalid_json():
	result = runner.invoke(cli, ["to-js", "{nope"])
	assert result.exit_code == 1


def test_to_js_rejects_scalars():
	result = runner.invoke(cli, ["to-js", "5"])
	assert result.exit_code == 1


def test_to_json_attr():
	result = runner.invoke(cli, ["to-json", "[1, 2]", "--attr", "data-list"])
	assert result.stdout == "data-list='[1, 2]'\n"
