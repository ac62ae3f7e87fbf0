import pytest

from ipcosd.param import ParamError, ParamStore

INI_TEXT = """\
[video.0]
width = 1920
height = 1080

[osd.common]
font_path = /usr/share/font.ttf
"""


@pytest.fixture
def ini_path(tmp_path):
    path = tmp_path / "params.ini"
    path.write_text(INI_TEXT, encoding="utf-8")
    return path


def make_store(ini_path, tmp_path):
    return ParamStore(ini_path, tmp_path / "missing-factory.ini")


def test_get_int_reads_value(ini_path, tmp_path):
    store = make_store(ini_path, tmp_path)
    assert store.get_int("video.0:width", -1) == 1920
    assert store.get_int("video.0:height", -1) == 1080


def test_lookup_ignores_case(ini_path, tmp_path):
    store = make_store(ini_path, tmp_path)
    assert store.get_int("VIDEO.0:Width", -1) == 1920


def test_missing_entries_give_default(ini_path, tmp_path):
    store = make_store(ini_path, tmp_path)
    assert store.get_int("video.9:width", -1) == -1
    assert store.get_string("osd.common:nothing", "dflt") == "dflt"


def test_set_and_get_round_trip(ini_path, tmp_path):
    store = make_store(ini_path, tmp_path)
    store.set_int("video.0:width", 1280)
    store.set_string("osd.common:font_color", "fff799")
    assert store.get_int("video.0:width", -1) == 1280
    assert store.get_string("osd.common:font_color") == "fff799"


def test_save_then_new_store_sees_changes(ini_path, tmp_path):
    store = make_store(ini_path, tmp_path)
    store.set_int("video.0:height", 720)
    store.save()
    again = make_store(ini_path, tmp_path)
    assert again.get_int("video.0:height", -1) == 720
    assert again.get_string("osd.common:font_path") == "/usr/share/font.ttf"


def test_dump_lists_section_keys(ini_path, tmp_path):
    store = make_store(ini_path, tmp_path)
    pairs = store.dump()
    assert ("video.0:width", "1920") in pairs
    assert ("osd.common:font_path", "/usr/share/font.ttf") in pairs


def test_reload_picks_up_file_changes(ini_path, tmp_path):
    store = make_store(ini_path, tmp_path)
    ini_path.write_text("[video.0]\nwidth = 640\n", encoding="utf-8")
    store.reload()
    assert store.get_int("video.0:width", -1) == 640
    assert store.get_int("video.0:height", -1) == -1


def test_reload_of_broken_file_raises(ini_path, tmp_path):
    store = make_store(ini_path, tmp_path)
    ini_path.write_text("[video.0]\ngarbage\n", encoding="utf-8")
    with pytest.raises(ParamError):
        store.reload()
    assert store.get_int("video.0:width", -1) == -1


def test_factory_file_replaces_missing_config(tmp_path):
    factory = tmp_path / "factory.ini"
    factory.write_text(INI_TEXT, encoding="utf-8")
    target = tmp_path / "user.ini"
    store = ParamStore(target, factory)
    assert target.exists()
    assert store.get_int("video.0:width", -1) == 1920


def test_factory_file_replaces_broken_config(tmp_path):
    factory = tmp_path / "factory.ini"
    factory.write_text(INI_TEXT, encoding="utf-8")
    target = tmp_path / "user.ini"
    target.write_text("no equals sign here\n", encoding="utf-8")
    store = ParamStore(target, factory)
    assert store.get_int("video.0:height", -1) == 1080


def test_missing_config_and_factory_raise(tmp_path):
    with pytest.raises(ParamError):
        ParamStore(tmp_path / "absent.ini", tmp_path / "absent-factory.ini")


def test_close_saves_and_drops(ini_path, tmp_path):
    store = make_store(ini_path, tmp_path)
    store.set_int("video.0:width", 800)
    store.close()
    assert store.closed is True
    assert store.get_int("video.0:width", -1) == -1
    with pytest.raises(ParamError):
        store.set_int("video.0:width", 1)
    assert make_store(ini_path, tmp_path).get_int("video.0:width", -1) == 800


def test_context_manager_saves(ini_path, tmp_path):
    with make_store(ini_path, tmp_path) as store:
        store.set_string("osd.common:alignment", "left")
    assert make_store(ini_path, tmp_path).get_string("osd.common:alignment") == "left"


def test_save_failure_drops_parameters(ini_path, tmp_path):
    store = make_store(ini_path, tmp_path)
    ini_path.unlink()
    ini_path.mkdir()
    with pytest.raises(ParamError):
        store.save()
    assert store.get_int("video.0:width", -1) == -1