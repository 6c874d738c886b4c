"""CLI client for the Deal Audit API — posts a deal and prints a terminal report.

Usage:
    python deal-analyzer/analyze_deal.py --price 300000 --rent-ist 1000 --loan 240000:3.5:2:10
    python deal-analyzer/analyze_deal.py --file deal.json --rent-growth 2 --new-rate 4.5

A loan is given as AMOUNT:INTEREST:REPAYMENT[:FIXED_YEARS], rates in percent.
A JSON file may hold either a bare deal or {"deal": ..., "scenario": ...};
flags override values from the file.
"""

import argparse
import asyncio
import json
import sys
from decimal import Decimal
from pathlib import Path

import httpx


# ── Helpers ──────────────────────────────────────────────────────────────────

def _pct(v) -> str:
    """Format a percent value (already scaled, 4.0 = 4%)."""
    return f"{float(v):.2f} %"


def _euro(v) -> str:
    """German-style currency: 1.234,56 €."""
    s = f"{float(v):,.2f}"
    return s.replace(",", "_").replace(".", ",").replace("_", ".") + " €"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def parse_loan(text: str) -> dict:
    """AMOUNT:INTEREST:REPAYMENT[:FIXED_YEARS] -> loan payload."""
    parts = text.split(":")
    if len(parts) not in (3, 4):
        raise argparse.ArgumentTypeError(
            f"Invalid loan '{text}', expected AMOUNT:INTEREST:REPAYMENT[:FIXED_YEARS]"
        )
    try:
        loan = {
            "amount": str(Decimal(parts[0])),
            "interest_rate": str(Decimal(parts[1])),
            "repayment_rate": str(Decimal(parts[2])),
        }
        if len(parts) == 4:
            loan["fixed_years"] = int(parts[3])
    except (ArithmeticError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid loan '{text}': {e}")
    return loan


def build_payload(args: argparse.Namespace) -> dict:
    """Merge an optional JSON file with command-line overrides."""
    deal: dict = {}
    scenario: dict = {}
    if args.file:
        raw = json.loads(Path(args.file).read_text(encoding="utf-8"))
        if "deal" in raw:
            deal = dict(raw["deal"])
            scenario = dict(raw.get("scenario") or {})
        else:
            deal = dict(raw)

    deal_fields = {
        "price": "purchase_price",
        "transfer_tax": "transfer_tax_rate",
        "renovation": "renovation_costs",
        "rent_ist": "cold_rent_ist",
        "garage_ist": "garage_ist",
        "rent_soll": "cold_rent_soll",
        "garage_soll": "garage_soll",
        "target_year": "target_year",
        "housegeld": "housegeld",
        "reserves": "reserves",
        "equity": "equity",
        "afa_rate": "afa_rate",
        "tax_rate": "marginal_tax_rate",
    }
    scenario_fields = {
        "rent_growth": "rent_growth_rate",
        "new_rate": "new_interest_rate",
        "new_repayment": "new_repayment_rate",
    }
    for cli_name, api_name in deal_fields.items():
        val = getattr(args, cli_name)
        if val is not None:
            deal[api_name] = val if not isinstance(val, Decimal) else str(val)
    for cli_name, api_name in scenario_fields.items():
        val = getattr(args, cli_name)
        if val is not None:
            scenario[api_name] = str(val)
    if args.loan:
        deal["loans"] = args.loan

    payload: dict = {"deal": deal}
    if scenario:
        payload["scenario"] = scenario
    return payload


# ── Report sections ──────────────────────────────────────────────────────────

def print_acquisition(m: dict) -> None:
    _header("Ankauf")
    print(f"  Kaufnebenkosten:      {_euro(m['acquisition_costs'])}")
    print(f"  Gesamtinvestition:    {_euro(m['total_investment'])}")
    print(f"  AfA-Basis:            {_euro(m['afa_base'])}")
    print(f"  AfA p.a.:             {_euro(m['annual_depreciation'])}")


def print_income_block(title: str, block: dict) -> None:
    _header(title)
    print(f"  Brutto (Mo.):         {_euro(block['gross_income_mo'])}")
    print(f"  Netto (Mo.):          {_euro(block['net_income_mo'])}")
    print(f"  Bruttorendite:        {_pct(block['yield_gross_pct'])}")
    print(f"  Nettorendite:         {_pct(block['yield_net_pct'])}")
    print(f"  Faktor:               {float(block['multiplier']):.2f}")
    print(f"  Annuität (Mo.):       {_euro(block['annuity_mo'])}")
    print(f"  Steuer (Mo.):         {_euro(block['tax_mo'])}")
    print(f"  CF vor Steuern:       {_euro(block['cashflow_pre_tax_mo'])}")
    print(f"  CF nach Steuern:      {_euro(block['cashflow_post_tax_mo'])}")
    print(f"  EK-Rendite:           {_pct(block['equity_yield_pct'])}")


def print_financing(m: dict) -> None:
    loans = m.get("loans", [])
    if not loans:
        return
    _header("Finanzierung")
    print(f"  {'#':>2}  {'Darlehen':>14}  {'Rate (Mo.)':>12}  {'Jahre':>5}  {'Restschuld':>14}")
    print(f"  {'--':>2}  {'-' * 14}  {'-' * 12}  {'-' * 5}  {'-' * 14}")
    for i, loan in enumerate(loans, start=1):
        print(
            f"  {i:>2}  {_euro(loan['amount']):>14}  {_euro(loan['annuity_mo']):>12}  "
            f"{loan['fixed_years']:>5}  {_euro(loan['balance_at_horizon']):>14}"
        )
    print()
    print(f"  Restschuld gesamt:    {_euro(m['loan_balance_at_horizon'])}")


def print_scenario(m: dict) -> None:
    s = m["scenario"]
    _header(f"Nach Zinsbindungsende (Jahr {s['horizon_years']})")
    print(f"  Neue Annuität (Mo.):  {_euro(s['new_annuity_mo'])}")
    print(f"  Miete (Mo.):          {_euro(s['projected_income_mo'])}")
    print(f"  Steuer (Mo.):         {_euro(s['projected_tax_mo'])}")
    print(f"  CF vor Steuern:       {_euro(s['projected_cashflow_pre_tax_mo'])}")
    print(f"  CF nach Steuern:      {_euro(s['projected_cashflow_post_tax_mo'])}")


def print_report(data: dict) -> None:
    m = data["metrics"]
    print_acquisition(m)
    print_income_block("Ertrag IST", m["ist"])
    if m.get("soll"):
        print_income_block("Ertrag SOLL", m["soll"])
    print_financing(m)
    print_scenario(m)
    print()


# ── Main ─────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analyze a buy-and-hold acquisition via the Deal Audit API"
    )
    parser.add_argument("--file", help="JSON file with a deal (and optional scenario)")
    parser.add_argument("--price", type=Decimal, help="Purchase price")
    parser.add_argument("--transfer-tax", type=Decimal, help="Grunderwerbsteuer in percent")
    parser.add_argument("--renovation", type=Decimal, help="Renovation costs")
    parser.add_argument("--rent-ist", type=Decimal, help="Current cold rent per month")
    parser.add_argument("--garage-ist", type=Decimal, help="Current garage rent per month")
    parser.add_argument("--rent-soll", type=Decimal, help="Target cold rent per month")
    parser.add_argument("--garage-soll", type=Decimal, help="Target garage rent per month")
    parser.add_argument("--target-year", type=int, help="Year the target rent is reached")
    parser.add_argument("--housegeld", type=Decimal, help="Non-recoverable Hausgeld per month")
    parser.add_argument("--reserves", type=Decimal, help="Maintenance reserve per month")
    parser.add_argument("--equity", type=Decimal, help="Equity invested")
    parser.add_argument("--afa-rate", type=Decimal, help="AfA rate in percent")
    parser.add_argument("--tax-rate", type=Decimal, help="Marginal tax rate in percent")
    parser.add_argument(
        "--loan", type=parse_loan, action="append",
        help="AMOUNT:INTEREST:REPAYMENT[:FIXED_YEARS], repeatable",
    )
    parser.add_argument("--rent-growth", type=Decimal, help="Rent growth p.a. in percent")
    parser.add_argument("--new-rate", type=Decimal, help="Interest rate after rate lock")
    parser.add_argument("--new-repayment", type=Decimal, help="Repayment rate after rate lock")
    parser.add_argument(
        "--api-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )
    return parser


async def main() -> None:
    args = build_parser().parse_args()
    payload = build_payload(args)

    url = f"{args.api_url}/api/v1/deals/analyze"

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn src.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.HTTPError as e:
            print(f"Error: Request failed: {e}", file=sys.stderr)
            sys.exit(1)

        if resp.status_code != 200:
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            print(f"  {detail}", file=sys.stderr)
            sys.exit(1)

        data = resp.json()

    print_report(data)


if __name__ == "__main__":
    asyncio.run(main())
