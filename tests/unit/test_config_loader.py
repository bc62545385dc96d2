import textwrap

import pytest

from molbridge.config.loader import ConfigError, load_config


def test_defaults_without_files(tmp_path):
    cfg = load_config(tmp_path)
    assert cfg.project_root == tmp_path.resolve()
    assert cfg.adapter.exe is None
    assert cfg.sources == []
    assert cfg.scratch_path() is None
    assert cfg.log_path() == tmp_path.resolve() / "molbridge.log"


def test_explicit_config_overrides_project(tmp_path):
    (tmp_path / "molbridge.toml").write_text(textwrap.dedent("""
    [adapter]
    exe = "orca"
    in_fn = "mol.inp"
    scratch = "_scratch"

    [logging]
    level = "DEBUG"
    """))
    extra = tmp_path / "override.toml"
    extra.write_text(textwrap.dedent("""
    [adapter]
    exe = "xtb"
    exe_endops = "--opt"
    """))
    cfg = load_config(tmp_path, extra)
    assert cfg.adapter.exe == "xtb"
    assert cfg.adapter.in_fn == "mol.inp"
    assert cfg.adapter.exe_endops == "--opt"
    assert cfg.logging.level == "DEBUG"
    assert len(cfg.sources) == 2

    kw = cfg.adapter_kwargs()
    assert kw["scratch"] == tmp_path.resolve() / "_scratch"
    assert kw["exe"] == "xtb"
    assert kw["chdir_scratch"] is False


def test_unknown_keys_ignored(tmp_path):
    (tmp_path / "molbridge.toml").write_text('[adapter]\nexe = "a"\nbogus = 1\n[other]\nx = 2\n')
    cfg = load_config(tmp_path)
    assert cfg.adapter.exe == "a"
    assert not hasattr(cfg.adapter, "bogus")


def test_missing_explicit_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path, tmp_path / "nope.toml")


@pytest.mark.parametrize(
    "body, key",
    [
        ("[adapter]\nscratch = 5\n", "scratch"),
        ("[adapter]\nexe = [\"a\", \"b\"]\n", "exe"),
        ("[adapter]\nchdir_scratch = \"yes\"\n", "chdir_scratch"),
        ("[logging]\nconsole = 1\n", "console"),
    ],
)
def test_wrong_value_types_rejected(tmp_path, body, key):
    (tmp_path / "molbridge.toml").write_text(body)
    with pytest.raises(ConfigError, match=key):
        load_config(tmp_path)
