"""Classify a JSON dump of decorated TON account events and print the resulting records.

Usage:
    PYTHONPATH=src python scripts/classify_events.py events.json [JETTON_ADDRESS SYMBOL DECIMALS]

The file holds a list of AccountEvent objects, e.g.:
    [{"event_id": "abc", "lt": 1, "decoration": {"kind": "outgoing_jetton", "sent_to_self": false},
      "actions": [{"kind": "jetton_transfer", "recipient": "0:<64 hex chars>", "amount": 100}]}]
"""

import json
import logging
import sys

from tonwallet.config import configure_logging, settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)-5s %(name)s - %(message)s",
)
configure_logging(settings)
logger = logging.getLogger("classify_events")

TON_DECIMALS = 9


def main() -> int:
    from pydantic import TypeAdapter, ValidationError

    from tonwallet.converter.transaction import classify
    from tonwallet.domain.models.kit import AccountEvent
    from tonwallet.domain.models.token import Token, TokenType, TransactionSource

    if len(sys.argv) not in (2, 5):
        print(__doc__)
        return 2

    ton = Token(coin_code="TON", coin_name="Toncoin", decimals=TON_DECIMALS)
    transfer_token = ton
    if len(sys.argv) == 5:
        transfer_token = Token(
            type=TokenType.jetton(sys.argv[2]),
            coin_code=sys.argv[3],
            decimals=int(sys.argv[4]),
        )

    with open(sys.argv[1]) as fh:
        raw = json.load(fh)

    try:
        events = TypeAdapter(list[AccountEvent]).validate_python(raw)
    except ValidationError as exc:
        logger.error("Invalid event dump: %s", exc)
        return 1

    source = TransactionSource()
    for event in events:
        record = classify(event, ton, transfer_token, source)
        main_value = record.main_value
        shown = f"{main_value.value} {main_value.token.coin_code}" if main_value is not None else "-"
        print(f"  {event.event_id:<20s} {record.record_type.value:<16s} {shown}")

    logger.info("Classified %d events", len(events))
    return 0


if __name__ == "__main__":
    sys.exit(main())
