from bs4 import BeautifulSoup

from ..errors import NotFound, ParseFailure
from ..models import Identity


def parse_ids(xml: str, identifier: str) -> Identity:
    """
    Extract the numeric identity and custom URL from a community profile document.

    The document is the `?xml=1` rendering of a profile page, e.g.:

        <profile>
            <steamID64>76561197960287930</steamID64>
            <customURL><![CDATA[gabelogannewell]]></customURL>
            ...
        </profile>

    Args:
        xml: Raw XML of the profile document
        identifier: Alias or numeric identity that was looked up (for messages)

    Returns:
        Identity with custom_url set to None when the field is empty or missing

    Raises:
        ParseFailure: If the document has no root element
        NotFound: If the document carries no steamID64
    """
    soup = BeautifulSoup(xml, "xml")

    root = soup.find(True)
    if root is None:
        raise ParseFailure(f"could not parse profile document for {identifier}")

    steamid64 = _child_text(root, "steamID64")
    if not steamid64:
        # Unknown profiles come back as <response><error>...</error></response>
        error = _child_text(root, "error")
        if error:
            raise NotFound(f"could not find {identifier}: {error}")
        raise NotFound(f"could not find {identifier}")

    return Identity(steamid64=steamid64, custom_url=_child_text(root, "customURL"))


def _child_text(root, name: str) -> str | None:
    """Text of a direct child element, or None if missing or blank."""
    element = root.find(name, recursive=False)
    if element is None:
        return None
    text = element.get_text(strip=True)
    return text or None
