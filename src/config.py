from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Acquisition cost defaults (percent of purchase price)
    default_transfer_tax_rate: Decimal = Decimal("5")
    default_broker_rate: Decimal = Decimal("3.57")
    default_notary_rate: Decimal = Decimal("1.5")
    default_registry_rate: Decimal = Decimal("0.5")

    # Financing defaults
    default_interest_rate: Decimal = Decimal("3.5")
    default_repayment_rate: Decimal = Decimal("2")
    default_fixed_years: int = 10

    # Tax defaults
    default_afa_rate: Decimal = Decimal("2")
    default_building_share: Decimal = Decimal("80")
    default_marginal_tax_rate: Decimal = Decimal("42")

    # Renovation spend above this share of the purchase price is added to the AfA base
    renovation_afa_threshold: Decimal = Decimal("0.15")

    # Scenario defaults
    default_rent_growth_rate: Decimal = Decimal("3")
    default_new_interest_rate: Decimal = Decimal("0")
    default_new_repayment_rate: Decimal = Decimal("2")

    # Grunderwerbsteuer per Bundesland (percent). States change these.
    transfer_tax_by_state: dict[str, Decimal] = {
        "Bayern": Decimal("3.5"),
        "Hamburg": Decimal("4.5"),
        "Baden-Württemberg": Decimal("5.0"),
        "Bremen": Decimal("5.0"),
        "Rheinland-Pfalz": Decimal("5.0"),
        "Sachsen-Anhalt": Decimal("5.0"),
        "Sachsen": Decimal("5.5"),
        "Schleswig-Holstein": Decimal("5.5"),
        "Berlin": Decimal("6.0"),
        "Hessen": Decimal("6.0"),
        "Mecklenburg-Vorpommern": Decimal("6.0"),
        "Brandenburg": Decimal("6.5"),
        "Nordrhein-Westfalen": Decimal("6.5"),
        "Saarland": Decimal("6.5"),
        "Niedersachsen": Decimal("5.0"),
        "Thüringen": Decimal("5.0"),
    }


settings = Settings()
