"""Parser for JSON fleet snapshots (subscriptions + coupons)."""

import json
from pathlib import Path

import pydantic
from loguru import logger
from pydantic import BaseModel, Field

from pricing_engine.core.models import Coupon, Subscription
from pricing_engine.shared.exceptions import ParseError, UnsupportedFileError


class FleetSnapshot(BaseModel):
    """Subscriptions and coupons exported from the billing backend."""

    subscriptions: list[Subscription] = Field(default_factory=list)
    coupons: list[Coupon] = Field(default_factory=list)

    model_config = {"frozen": True}


class JSONFleetParser:
    """Parser for fleet snapshot files.

    Expected layout::

        {
          "subscriptions": [{"plan": "pro", "billingCycle": "monthly", ...}],
          "coupons": [{"id": "c1", "code": "PROMO", "type": "progressive", ...}]
        }
    """

    def __init__(self, file_path: Path):
        self.file_path = file_path

    def parse(self) -> FleetSnapshot:
        """Read and validate the snapshot.

        Raises:
            UnsupportedFileError: If the file is not a .json file
            ParseError: If the content is not valid JSON or has invalid records
        """
        if self.file_path.suffix.lower() != ".json":
            raise UnsupportedFileError(
                f"Formato de arquivo não suportado: {self.file_path.suffix}. "
                "Use um arquivo .json com assinaturas e cupons."
            )

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ParseError(f"Não foi possível ler {self.file_path.name}: {e}") from e

        if not isinstance(data, dict):
            raise ParseError("Arquivo deve conter um objeto com 'subscriptions' e 'coupons'")

        try:
            snapshot = FleetSnapshot.model_validate(data)
        except pydantic.ValidationError as e:
            raise ParseError(f"Registros inválidos em {self.file_path.name}: {e}") from e

        logger.debug(
            "{}: {} assinaturas, {} cupons",
            self.file_path.name,
            len(snapshot.subscriptions),
            len(snapshot.coupons),
        )
        return snapshot


def parse_fleet_file(file_path: Path) -> FleetSnapshot:
    """Parse a JSON fleet snapshot file."""
    parser = JSONFleetParser(file_path)
    return parser.parse()
