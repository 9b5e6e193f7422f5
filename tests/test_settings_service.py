from openmeta_importer.service.settings_service import EnvSettings


def test_defaults():
    options = EnvSettings(use_dotenv=False).as_options()
    assert options.allow_empty is False
    assert options.dump_document is True
    assert options.content_types == ["com.openmeta.openmetaschema"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("OPENMETA_ALLOW_EMPTY", "TRUE")
    monkeypatch.setenv("OPENMETA_DUMP_DOCUMENT", "0")
    monkeypatch.setenv(
        "OPENMETA_CONTENT_TYPES", " com.openmeta.openmetaschema, com.apple.property-list ,"
    )
    options = EnvSettings(use_dotenv=False).as_options()
    assert options.allow_empty is True
    assert options.dump_document is False
    assert options.content_types == ["com.openmeta.openmetaschema", "com.apple.property-list"]


def test_blank_content_types_fall_back(monkeypatch):
    monkeypatch.setenv("OPENMETA_CONTENT_TYPES", " , ")
    options = EnvSettings(use_dotenv=False).as_options()
    assert options.content_types == ["com.openmeta.openmetaschema"]


def test_dotenv_file_is_loaded(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("OPENMETA_ALLOW_EMPTY=1\n")
    monkeypatch.chdir(tmp_path)
    settings = EnvSettings()
    assert settings.get("OPENMETA_ALLOW_EMPTY") == "1"
    assert settings.as_options().allow_empty is True
