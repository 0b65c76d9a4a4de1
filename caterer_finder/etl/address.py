"""Split a Places ``formatted_address`` into street/city/state/zip."""

import logging
import re

from caterer_finder.models import AddressComponents

logger = logging.getLogger(__name__)

COUNTRY_SUFFIX = ", USA"
_ZIP_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")


def parse_address(address: str) -> AddressComponents:
    """Parse ``"123 Main St, Springfield, OR 97201, USA"`` style addresses.

    The last comma segment holds the state and zip, the one before it the city,
    and anything earlier is the street. Unparseable input is returned as the street.
    """
    try:
        text = address
        if text.endswith(COUNTRY_SUFFIX):
            text = text[: -len(COUNTRY_SUFFIX)]

        parts = [part.strip() for part in text.split(",")]
        if len(parts) == 1:
            return AddressComponents(street=parts[0])

        tokens = parts[-1].split()
        state_tokens = tokens
        zip_code = ""
        for index, token in enumerate(tokens):
            if _ZIP_PATTERN.match(token):
                zip_code = token
                state_tokens = tokens[:index]
                break

        return AddressComponents(
            street=", ".join(parts[:-2]),
            city=parts[-2],
            state=" ".join(state_tokens),
            zip_code=zip_code,
        )
    except Exception as exc:  # noqa: BLE001
        logger.warning("Error parsing address %r: %s", address, exc)
        return AddressComponents(street=address)
