import pytest

from playwith.errors import NotFound, ParseFailure
from playwith.parsers.directory import parse_ids


PROFILE_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<profile>
    <steamID64>76561197960287930</steamID64>
    <steamID>Rabscuttle</steamID>
    <onlineState>offline</onlineState>
    <customURL>gabelogannewell</customURL>
    <groups>
        <group isPrimary="1">
            <groupID64>103582791429521412</groupID64>
        </group>
    </groups>
</profile>
"""


def test_parse_ids():
    """Test parsing a profile document with an alias."""
    ids = parse_ids(PROFILE_XML, "gabelogannewell")

    assert ids.steamid64 == "76561197960287930"
    assert ids.custom_url == "gabelogannewell"


def test_parse_ids_empty_custom_url():
    """Test that an empty customURL is treated as absent."""
    xml = """<profile>
        <steamID64>76561198054973203</steamID64>
        <customURL></customURL>
    </profile>"""

    ids = parse_ids(xml, "76561198054973203")

    assert ids.steamid64 == "76561198054973203"
    assert ids.custom_url is None


def test_parse_ids_missing_custom_url():
    """Test a profile document without a customURL element."""
    xml = "<profile><steamID64>76561198054973203</steamID64></profile>"

    assert parse_ids(xml, "x").custom_url is None


def test_parse_ids_not_found():
    """Test the error document returned for unknown profiles."""
    xml = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<response><error><![CDATA[The specified profile could not be found.]]></error></response>"""

    with pytest.raises(NotFound) as exc_info:
        parse_ids(xml, "nobody")

    assert "nobody" in str(exc_info.value)


def test_parse_ids_missing_steam_id():
    """Test a well-formed document that lacks steamID64."""
    with pytest.raises(NotFound):
        parse_ids("<profile><steamID>Someone</steamID></profile>", "someone")


def test_parse_ids_empty_document():
    """Test that a document with no elements is a parse failure."""
    with pytest.raises(ParseFailure):
        parse_ids("", "someone")
