import importlib.util
import json
import pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]


def _load_script():
    spec = importlib.util.spec_from_file_location("i18n_lint", ROOT / "scripts/i18n_lint.py")
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_reports_keys_missing_from_a_language(locale_dir, capsys):
    mod = _load_script()
    code = mod.main(["--locale-dir", str(locale_dir), "--language", "zh-CN", "--language", "en-US"])
    assert code == 1
    assert "en-US missing keys: auth.logout" in capsys.readouterr().out


def test_passes_when_languages_agree(tmp_path, capsys):
    for lang in ("en", "de"):
        (tmp_path / lang).mkdir()
        (tmp_path / lang / "app.json").write_text(json.dumps({"a": {"b": lang}}), encoding="utf-8")
    mod = _load_script()
    code = mod.main(["--locale-dir", str(tmp_path), "--language", "en", "--language", "de", "--namespace", "app"])
    assert code == 0
    assert "All translation keys present." in capsys.readouterr().out


def test_locale_parity_helper():
    from i18next_checker.core.parity import locale_parity

    assert locale_parity({}) == {}
    assert locale_parity({"en": {"a", "b"}, "de": {"a"}, "fr": {"c"}}) == {
        "en": ["c"],
        "de": ["b", "c"],
        "fr": ["a", "b"],
    }
