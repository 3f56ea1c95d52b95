from typer.testing import CliRunner

from ciphersuite import __version__
from ciphersuite.cli import app

runner = CliRunner()


def test_plugins_lists_menu():
    result = runner.invoke(app, ["plugins"])
    assert result.exit_code == 0
    assert "1  caesar" in result.output
    assert "4  atbash" in result.output


def test_encrypt_caesar():
    result = runner.invoke(app, ["encrypt", "-c", "caesar", "-k", "3", "HELLO, WORLD!"])
    assert result.exit_code == 0
    assert result.output.strip() == "KHOOR, ZRUOG!"


def test_encrypt_negative_key():
    result = runner.invoke(app, ["encrypt", "-c", "caesar", "--key=-3", "abc"])
    assert result.exit_code == 0
    assert result.output.strip() == "xyz"


def test_decrypt_vigenere():
    result = runner.invoke(app, ["decrypt", "-c", "vigenere", "-k", "LEMON", "MYGPQWFGSOIS"])
    assert result.exit_code == 0
    assert result.output.strip() == "ATTACKATDAWN"


def test_malformed_input_is_bad_parameter():
    result = runner.invoke(app, ["decrypt", "-c", "a1z26", "08051"])
    assert result.exit_code == 2


def test_unknown_cipher_is_bad_parameter():
    result = runner.invoke(app, ["encrypt", "-c", "enigma", "abc"])
    assert result.exit_code == 2


def test_bad_log_level():
    result = runner.invoke(app, ["--log-level", "loud", "plugins"])
    assert result.exit_code == 2


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_interactive_caesar_reprompts_on_bad_input():
    # bad menu choice, bad direction, message, bad key, key
    result = runner.invoke(app, ["interactive"], input="9\n1\nx\nE\nabc\nthree\n-3\n")
    assert result.exit_code == 0
    assert "Invalid choice pick a number 1-4." in result.output
    assert result.output.rstrip().endswith("xyz")


def test_interactive_vigenere_decrypt():
    result = runner.invoke(app, ["interactive"], input="2\nD\nMYGPQWFGSOIS\nLEMON\n")
    assert result.exit_code == 0
    assert result.output.rstrip().endswith("ATTACKATDAWN")


def test_interactive_atbash_has_no_key_prompt():
    result = runner.invoke(app, ["interactive"], input="4\nE\nHELLO\n")
    assert result.exit_code == 0
    assert "key" not in result.output.lower()
    assert result.output.rstrip().endswith("SVOOL")


def test_interactive_reprompts_after_oversized_key():
    result = runner.invoke(app, ["interactive"], input="1\nE\nabc\n" + "9" * 5000 + "\n3\n")
    assert result.exit_code == 0, result.exception
    assert result.output.rstrip().endswith("def")


def test_encrypt_oversized_key_is_bad_parameter():
    result = runner.invoke(app, ["encrypt", "-c", "caesar", "-k", "9" * 5000, "abc"])
    assert result.exit_code == 2
