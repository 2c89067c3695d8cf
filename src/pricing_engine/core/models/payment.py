"""Payment instrument input model."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CreditCardInput(BaseModel):
    """Card data as typed in the checkout form.

    Fields are kept as raw strings; validation is done by the validators
    in pricing_engine.shared.validators, never on construction.
    """

    number: str = Field(default="", description="Card number")
    holder_name: str = Field(default="", description="Name printed on the card")
    expiry_month: str = Field(default="", description="Expiry month (MM)")
    expiry_year: str = Field(default="", description="Expiry year (YYYY or YY)")
    ccv: str = Field(default="", description="Security code")

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}
