import markdown
import pytest
import yaml

from mdmeta.context import MetaContext, get, get_items, try_get, try_get_items

@pytest.fixture
def context():
    return MetaContext()

def test_empty_context(context):
    """Test that a session without front matter reports nothing"""
    assert context.data is None
    assert get(context) is None
    assert try_get(context) == (None, None)
    assert get_items(context) is None
    assert try_get_items(context) == (None, None)

def test_markdown_without_extension():
    """Test accessors on a Markdown instance that never captured metadata"""
    md = markdown.Markdown()
    assert get(md) is None
    assert try_get(md) == (None, None)

def test_successful_put(context):
    node = yaml.compose("Title: X\n")
    context.put({'Title': 'X'}, node, None, raw="Title: X\n")

    assert get(context) == {'Title': 'X'}
    assert try_get(context) == ({'Title': 'X'}, None)
    assert get_items(context) is node
    assert try_get_items(context) == (node, None)

def test_error_put(context):
    """Test that an error hides both representations"""
    error = yaml.YAMLError("bad front matter")
    context.put({'Title': 'X'}, yaml.compose("Title: X\n"), error)

    assert get(context) is None
    assert try_get(context) == (None, error)
    assert get_items(context) is None
    assert try_get_items(context) == (None, error)
    assert context.data.error is error

def test_empty_mapping_is_not_absent(context):
    """Test that an empty block differs from a missing block"""
    context.put({}, None, None)
    assert get(context) == {}
    assert try_get(context) == ({}, None)
