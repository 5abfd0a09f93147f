# zhconvert

Dictionary-driven conversion between Chinese character variants, such as
Simplified to Traditional Chinese, with regional phrase variants.

Text is first split into segments by maximal matching against a dictionary,
then each segment is run through a chain of conversions. Each conversion
replaces the longest dictionary key that matches at each position with that
entry's first value; characters that match nothing are kept as they are.

## Installation

```
pip install .
```

## Building a converter by hand

```python
from zhconvert.dict_entry import DictEntry
from zhconvert.dict_group import DictGroup
from zhconvert.darts_dict import DartsDict
from zhconvert.conversion import Conversion
from zhconvert.conversion_chain import ConversionChain
from zhconvert.segmentation import MaxMatchSegmentation
from zhconvert.converter import Converter

phrases = DartsDict([
    DictEntry("头发", ["頭髮"]),
    DictEntry("干燥", ["乾燥"]),
    DictEntry("太后", ["太后"]),
])
characters = DartsDict([
    DictEntry("干", ["幹", "乾", "干"]),
    DictEntry("发", ["發", "髮"]),
    DictEntry("头", ["頭"]),
])
dictionary = DictGroup([phrases, characters])

converter = Converter(
    "s2t",
    MaxMatchSegmentation(dictionary),
    ConversionChain([Conversion(dictionary)]),
)
print(converter.convert("太后的头发干燥"))  # 太后的頭髮乾燥
```

A `DictGroup` consults its dictionaries in order, so earlier ones take
precedence. Every dictionary offers `match`, `match_prefix` (longest key
that prefixes a word) and `match_all_prefixes` (all such keys, longest
first).

## Loading a converter from a configuration file

A configuration is a JSON object with an optional `name`, a required
`segmentation` object (`"type": "mmseg"` with a `dict`) and a required
`conversion_chain` array of objects, each with a `dict`. A dictionary is
either `{"type": "ocd", "file": ...}`, naming a compiled dictionary file, or
`{"type": "group", "dicts": [...]}`, combining several others.

```python
from zhconvert.config import Config

config = Config("/path/to/data")
converter = config.new_from_file("s2t.json")
print(converter.convert("燕燕于飞"))
```

A configuration file is looked up as given, then in the data directory
passed to `Config`, also with `.json` appended. Dictionary files are looked
up as given, then in the configuration's directory, then in the data
directory. Loaded dictionaries are cached per `Config`. A missing file
raises `FileNotFound`; malformed JSON, a missing or mistyped property or an
unknown type raises `InvalidFormat`. `Config.new_from_string` builds a
converter from JSON text and a configuration directory.

## Compiled dictionaries

`DartsDict.serialize` writes a dictionary to a binary stream and
`DartsDict.from_stream` reads it back; `DartsDict.from_dict` copies the
entries of any other dictionary. `BinaryDict` handles the entry table on
its own. Entries without values cannot be serialized.

```python
with open("phrases.ocd", "wb") as stream:
    phrases.serialize(stream)

with open("phrases.ocd", "rb") as stream:
    loaded = DartsDict.from_stream(stream)
```

## Extracting phrases from a corpus

`PhraseExtract` finds likely words in raw text from their frequency,
cohesion (pointwise mutual information) and the entropy of their neighbours.

```python
from zhconvert.phrase_extract import PhraseExtract

extractor = PhraseExtract(word_min_length=2, word_max_length=2)
words = extractor.extract(corpus_text)
print(words)
```

Each step, such as `calculate_frequency` or `calculate_cohesions`, can also be
run on its own after `set_full_text`, and the scores of a candidate are
available through `frequency`, `probability`, `log_probability`, `cohesion`,
`prefix_entropy`, `suffix_entropy` and `entropy`. The filters applied before
and after scoring can be replaced through `pre_calculation_filter` and
`post_calculation_filter`.

## What the package does not do

- Plain-text dictionary files are not read: configurations may only name
  `"ocd"` and `"group"` dictionaries, and any other type raises
  `InvalidFormat`.
- No dictionary data or ready-made configurations are included; you supply
  your own.
- There is no command-line tool; everything is used from Python.

## Running the tests

```
pip install .[test]
pytest
```