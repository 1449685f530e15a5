import pytest
import yaml
from markdown.util import AtomicString

from mdmeta.renderer import BROKEN_MAPPING, MetaTableRenderer, value_to_string

MAP_TAG = "tag:yaml.org,2002:map"
STR_TAG = "tag:yaml.org,2002:str"


class AliasLikeNode(yaml.nodes.Node):
    id = "alias"


def value_of(source):
    """Compose a single-key document and return its value node"""
    return yaml.compose(source).value[0][1]

@pytest.fixture
def renderer():
    return MetaTableRenderer()

@pytest.mark.parametrize("source,expected", [
    ("v: plain", "plain"),
    ("v: 1.10", "1.10"),
    ("v: yes", "yes"),
    ("v: ~", "~"),
    ("v:", ""),
    ("v: 'quoted text'", "quoted text"),
])
def test_scalar_values(source, expected):
    assert value_to_string(value_of(source)) == expected

def test_sequence_value():
    assert value_to_string(value_of("v: [a, b, c]")) == "[a b c]"

def test_empty_sequence():
    assert value_to_string(value_of("v: []")) == "[]"

def test_nested_sequence():
    assert value_to_string(value_of("v: [a, [b, c]]")) == "[a [b c]]"

def test_mapping_pairs_reversed():
    """Test that mapping pairs come out in reverse declaration order"""
    node = value_of("v: {first: 1, second: 2, third: 3}")
    assert value_to_string(node) == "map[third:3 second:2 first:1]"

def test_sequence_of_mappings():
    node = value_of("v:\n  - name: Ann\n    role: editor\n")
    assert value_to_string(node) == "[map[role:editor name:Ann]]"

def test_broken_mapping():
    key = yaml.ScalarNode(STR_TAG, "k")
    node = yaml.MappingNode(MAP_TAG, [(key,)])
    assert value_to_string(node) == BROKEN_MAPPING

def test_unsupported_node_kind():
    node = AliasLikeNode(STR_TAG, None, None, None)
    assert value_to_string(node) == "<do not support yaml node kind 'alias'>"

def test_missing_node():
    assert value_to_string(None) == ""

def test_render_table(renderer):
    table = renderer.render_table(yaml.compose("b: 1\na: [x, y]\n"))

    thead, tbody = list(table)
    assert thead.tag == "thead"
    assert tbody.tag == "tbody"
    assert [th.text for th in thead[0]] == ["b", "a"]
    assert [td.text for td in tbody[0]] == ["1", "[x y]"]
    assert all(isinstance(td.text, AtomicString) for td in tbody[0])
    assert all(not td.attrib for td in tbody[0])

def test_render_table_requires_mapping(renderer):
    assert renderer.render_table(yaml.compose("- a\n- b\n")) is None
    assert renderer.render_table(yaml.compose("text")) is None
    assert renderer.render_table(None) is None
