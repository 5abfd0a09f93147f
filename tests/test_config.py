import json

import pytest

from zhconvert.binary_dict import InvalidFormat
from zhconvert.config import Config, FileNotFound
from zhconvert.darts_dict import DartsDict
from zhconvert.dict_entry import DictEntry
from zhconvert.dict_group import DictGroup

INPUT = "燕燕于飞差池其羽之子于归远送于野"
EXPECTED = "燕燕于飛差池其羽之子于歸遠送於野"


def write_ocd(path, entries):
    with open(path, "wb") as stream:
        DartsDict([DictEntry(key, values) for key, values in entries]).serialize(stream)


GROUP = {
    "type": "group",
    "dicts": [
        {"type": "ocd", "file": "phrases.ocd"},
        {"type": "ocd", "file": "chars.ocd"},
    ],
}

CONFIG = {
    "name": "Test conversion",
    "segmentation": {"type": "mmseg", "dict": GROUP},
    "conversion_chain": [{"dict": GROUP}],
}


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    directory = tmp_path / "config"
    directory.mkdir()
    write_ocd(directory / "phrases.ocd", [("于野", ["於野"])])
    write_ocd(
        directory / "chars.ocd",
        [("归", ["歸"]), ("远", ["遠"]), ("飞", ["飛"])],
    )
    (directory / "config.json").write_text(json.dumps(CONFIG), encoding="utf-8")
    elsewhere = tmp_path / "cwd"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)
    return directory


def test_convert_from_file(config_dir):
    converter = Config().new_from_file(str(config_dir / "config.json"))
    assert converter.convert(INPUT) == EXPECTED
    assert converter.name == "Test conversion"


def test_nonexisting_path():
    path = "/opencc/no/such/file/or/directory"
    with pytest.raises(FileNotFound) as info:
        Config().new_from_file(path)
    assert str(info.value) == path + " not found or not accessible."
    assert info.value.path == path


def test_new_from_string_without_trailing_slash(config_dir):
    content = (config_dir / "config.json").read_text(encoding="utf-8")
    converter = Config().new_from_string(content, str(config_dir))
    assert converter.convert(INPUT) == EXPECTED


def test_new_from_string_with_trailing_slash(config_dir):
    content = json.dumps(CONFIG)
    converter = Config().new_from_string(content, str(config_dir) + "/")
    assert converter.convert(INPUT) == EXPECTED


def test_config_found_in_data_directory_with_json_suffix(config_dir):
    converter = Config(str(config_dir)).new_from_file("config")
    assert converter.convert(INPUT) == EXPECTED


def test_dicts_found_in_data_directory(config_dir):
    converter = Config(str(config_dir)).new_from_string(json.dumps(CONFIG), "")
    assert converter.convert(INPUT) == EXPECTED


def test_missing_name_gives_empty_name(config_dir):
    doc = dict(CONFIG)
    del doc["name"]
    converter = Config().new_from_string(json.dumps(doc), str(config_dir))
    assert converter.name == ""


def test_dictionaries_are_cached(config_dir):
    config = Config()
    first = config.new_from_string(json.dumps(CONFIG), str(config_dir))
    second = config.new_from_string(json.dumps(CONFIG), str(config_dir))
    group1 = first.segmentation.dictionary
    group2 = second.segmentation.dictionary
    assert isinstance(group1, DictGroup)
    assert group1.dicts[0] is group2.dicts[0]
    assert group1.dicts[1] is first.conversion_chain.conversions[0].dictionary.dicts[1]


def test_non_object_chain_elements_are_skipped(config_dir):
    doc = dict(CONFIG, conversion_chain=[1, "x", {"dict": GROUP}])
    converter = Config().new_from_string(json.dumps(doc), str(config_dir))
    assert len(converter.conversion_chain.conversions) == 1


def test_missing_dictionary_file(config_dir):
    doc = dict(CONFIG, conversion_chain=[{"dict": {"type": "ocd", "file": "nope.ocd"}}])
    with pytest.raises(FileNotFound) as info:
        Config().new_from_string(json.dumps(doc), str(config_dir))
    assert str(info.value) == "nope.ocd not found or not accessible."


def test_invalid_dictionary_file(config_dir):
    (config_dir / "bad.ocd").write_bytes(b"garbage")
    doc = dict(CONFIG, conversion_chain=[{"dict": {"type": "ocd", "file": "bad.ocd"}}])
    with pytest.raises(InvalidFormat):
        Config().new_from_string(json.dumps(doc), str(config_dir))


def test_invalid_json():
    with pytest.raises(InvalidFormat, match="Error parsing JSON"):
        Config().new_from_string("{not json", "dir")


def test_root_must_be_object():
    with pytest.raises(InvalidFormat, match="Root of configuration must be an object"):
        Config().new_from_string("[]", "dir")


def test_missing_segmentation():
    with pytest.raises(InvalidFormat, match="Required property not found: segmentation"):
        Config().new_from_string(json.dumps({"conversion_chain": []}), "dir")


def test_segmentation_must_be_object():
    doc = {"segmentation": [], "conversion_chain": []}
    with pytest.raises(InvalidFormat, match="Property must be an object: segmentation"):
        Config().new_from_string(json.dumps(doc), "dir")


def test_unknown_segmentation_type():
    doc = {"segmentation": {"type": "other"}, "conversion_chain": []}
    with pytest.raises(InvalidFormat, match="Unknown segmentation type: other"):
        Config().new_from_string(json.dumps(doc), "dir")


def test_conversion_chain_must_be_array(config_dir):
    doc = dict(CONFIG, conversion_chain={})
    with pytest.raises(InvalidFormat, match="Property must be an array: conversion_chain"):
        Config().new_from_string(json.dumps(doc), str(config_dir))


def test_unknown_dictionary_type(config_dir):
    doc = dict(CONFIG, conversion_chain=[{"dict": {"type": "weird", "file": "x"}}])
    with pytest.raises(InvalidFormat, match="Unknown dictionary type: weird"):
        Config().new_from_string(json.dumps(doc), str(config_dir))


def test_dictionary_type_must_be_string(config_dir):
    doc = dict(CONFIG, conversion_chain=[{"dict": {"type": 3, "file": "x"}}])
    with pytest.raises(InvalidFormat, match="Property must be a string: type"):
        Config().new_from_string(json.dumps(doc), str(config_dir))


def test_group_elements_must_be_objects(config_dir):
    doc = dict(CONFIG, conversion_chain=[{"dict": {"type": "group", "dicts": [1]}}])
    with pytest.raises(InvalidFormat, match="Element of the array must be an object"):
        Config().new_from_string(json.dumps(doc), str(config_dir))


def test_dictionary_file_required_before_type_check(config_dir):
    doc = dict(CONFIG, conversion_chain=[{"dict": {"type": "weird"}}])
    with pytest.raises(InvalidFormat, match="Required property not found: file"):
        Config().new_from_string(json.dumps(doc), str(config_dir))


def test_file_not_found_is_a_file_not_found_error():
    with pytest.raises(FileNotFoundError):
        Config().new_from_file("/no/such/zhconvert/config.json")