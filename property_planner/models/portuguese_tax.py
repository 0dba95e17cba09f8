"""
Portuguese property taxes.

- IMT: one-off transfer tax on purchase
- IMI: annual municipal tax on the fiscal value (VPT)
- IRS: tax on rental income, including the 2026-2029 reduced-rate regime

Explanations are returned in Dutch, matching the rest of the analysis texts.
"""

import math
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field

# Residential IMT bracket ceilings
IMT_EXEMPT_CEILING = 106346
IMT_2_PERCENT_CEILING = 145470
IMT_5_PERCENT_CEILING = 198347
IMT_7_PERCENT_CEILING = 330539
IMT_8_PERCENT_CEILING = 633453
IMT_6_PERCENT_FLAT_CEILING = 1102920
IMT_NON_RESIDENTIAL_RATE = 6.5

NEW_REGIME_RENT_CEILING = 2300
NEW_REGIME_REDUCED_RATE = 10.0
STANDARD_RENTAL_RATE = 25.0
ENGLOBAMENTO_ESTIMATE_RATE = 30.0
DHD_DISCOUNT = 0.20


class PropertyType(str, Enum):
    """Property use for IMT purposes."""

    RESIDENTIAL = "residential"
    NON_RESIDENTIAL = "non_residential"


class MunicipalityType(str, Enum):
    """Municipality category driving the default IMI rate."""

    STANDARD = "standard"
    LARGE_CITY = "large_city"
    RURAL = "rural"

    @property
    def imi_rate(self) -> float:
        """Default IMI rate in percent of VPT."""
        if self is MunicipalityType.LARGE_CITY:
            return 0.45
        if self is MunicipalityType.RURAL:
            return 0.3
        return 0.5


class IRSRegime(str, Enum):
    """Which rental income tax regime applied."""

    OLD = "old"
    NEW = "new"
    UNKNOWN = "unknown"


class IMTResult(BaseModel):
    """Transfer tax due on a purchase."""

    amount: float = Field(..., description="IMT due (EUR)")
    marginal_rate: float = Field(..., description="Marginal or flat rate (%)")
    average_rate: float = Field(..., description="Effective rate (%)")
    flat_rate: bool = Field(..., description="Whether a single rate (taxa única) applied")
    explanation: str


class IMIResult(BaseModel):
    """Annual municipal property tax."""

    annual_amount: float
    monthly_amount: float
    rate: float = Field(..., description="IMI rate (% of VPT)")
    explanation: str
    next_payment: str = Field(..., description="When the next bill is due")


class IRSInput(BaseModel):
    """Rental income facts needed for the IRS estimate."""

    income_year: int = Field(..., description="Year the rent is earned")
    monthly_rent: float = Field(..., description="Gross rent per month")
    contract_years: float = Field(default=1, description="Lease length (old regime)")
    renewals: int = Field(default=0, ge=0, description="Lease renewals (old regime)")
    englobamento: bool = Field(
        default=False, description="Opt into progressive taxation"
    )
    dhd_contract: bool = Field(
        default=False, description="Direito de Habitação Duradoura lease"
    )


class IRSResult(BaseModel):
    """Rental income tax estimate."""

    annual_tax: float
    monthly_tax: float
    gross_annual_rent: float
    net_annual_rent: float
    net_monthly_rent: float
    rate: float = Field(..., description="Applied rate (%)")
    regime: IRSRegime
    explanation: str
    savings: Optional[float] = Field(
        default=None, description="Saving versus the standard 25% rate"
    )
    warning: Optional[str] = None


class TotalTaxSummary(BaseModel):
    """One-off and recurring Portuguese taxes for a property."""

    imt: IMTResult
    imi: IMIResult
    irs: IRSResult
    one_off_total: float
    annual_total: float
    monthly_total: float


def round_cents(amount: float) -> float:
    """Round half up to whole cents."""
    return math.floor(amount * 100 + 0.5) / 100


def calculate_imt(
    purchase_price: float, property_type: PropertyType = PropertyType.NON_RESIDENTIAL
) -> IMTResult:
    """
    Calculate IMT transfer tax.

    Non-residential property pays a flat 6.5 %. Residential property pays
    marginal rates up to EUR 633,453 and a single rate on the whole price
    above that.

    Args:
        purchase_price: Purchase price
        property_type: Residential or non-residential

    Returns:
        IMT amount and rates
    """
    if purchase_price <= 0:
        return IMTResult(
            amount=0.0,
            marginal_rate=0.0,
            average_rate=0.0,
            flat_rate=False,
            explanation="Geen aankoopprijs opgegeven.",
        )

    if property_type == PropertyType.NON_RESIDENTIAL:
        return IMTResult(
            amount=round_cents(purchase_price * IMT_NON_RESIDENTIAL_RATE / 100),
            marginal_rate=IMT_NON_RESIDENTIAL_RATE,
            average_rate=IMT_NON_RESIDENTIAL_RATE,
            flat_rate=True,
            explanation="Voor niet-woningen (investeerders) geldt een vast tarief van 6,5%.",
        )

    # Tax accumulated over the full marginal brackets below each ceiling
    band_2 = (IMT_2_PERCENT_CEILING - IMT_EXEMPT_CEILING) * 0.02
    band_5 = (IMT_5_PERCENT_CEILING - IMT_2_PERCENT_CEILING) * 0.05
    band_7 = (IMT_7_PERCENT_CEILING - IMT_5_PERCENT_CEILING) * 0.07

    flat_rate = False
    if purchase_price <= IMT_EXEMPT_CEILING:
        amount = 0.0
        marginal_rate = 0.0
        explanation = "Vrijgesteld tot €106.346 voor woningen."
    elif purchase_price <= IMT_2_PERCENT_CEILING:
        amount = (purchase_price - IMT_EXEMPT_CEILING) * 0.02
        marginal_rate = 2.0
        explanation = "Progressief tarief: 0% tot €106.346, daarna 2%."
    elif purchase_price <= IMT_5_PERCENT_CEILING:
        amount = band_2 + (purchase_price - IMT_2_PERCENT_CEILING) * 0.05
        marginal_rate = 5.0
        explanation = "Progressief tarief: 2% tot €145.470, daarna 5%."
    elif purchase_price <= IMT_7_PERCENT_CEILING:
        amount = band_2 + band_5 + (purchase_price - IMT_5_PERCENT_CEILING) * 0.07
        marginal_rate = 7.0
        explanation = "Progressief tarief: 5% tot €198.347, daarna 7%."
    elif purchase_price <= IMT_8_PERCENT_CEILING:
        amount = (
            band_2 + band_5 + band_7 + (purchase_price - IMT_7_PERCENT_CEILING) * 0.08
        )
        marginal_rate = 8.0
        explanation = "Progressief tarief: 7% tot €330.539, daarna 8%."
    elif purchase_price <= IMT_6_PERCENT_FLAT_CEILING:
        amount = purchase_price * 0.06
        marginal_rate = 6.0
        flat_rate = True
        explanation = "Taxa única 6% voor woningen €633.454 – €1.102.920."
    else:
        amount = purchase_price * 0.075
        marginal_rate = 7.5
        flat_rate = True
        explanation = "Taxa única 7,5% voor woningen boven €1.102.920."

    average_rate = amount / purchase_price * 100

    return IMTResult(
        amount=max(0.0, round_cents(amount)),
        marginal_rate=marginal_rate,
        average_rate=math.floor(average_rate * 10000 + 0.5) / 10000,
        flat_rate=flat_rate,
        explanation=explanation,
    )


def next_imi_payment_year(reference_date: date) -> int:
    """IMI is billed in May/June; after May 31 the next bill is next year."""
    if reference_date > date(reference_date.year, 5, 31):
        return reference_date.year + 1
    return reference_date.year


def calculate_imi(
    vpt: float,
    municipality_type: MunicipalityType = MunicipalityType.STANDARD,
    custom_rate: Optional[float] = None,
    reference_date: Optional[date] = None,
) -> IMIResult:
    """
    Calculate annual IMI from the fiscal value.

    Args:
        vpt: Valor Patrimonial Tributário
        municipality_type: Category used for the default rate
        custom_rate: Municipality-specific rate in percent, overrides the default
        reference_date: Date used to work out the next payment (default today)

    Returns:
        Annual and monthly IMI
    """
    if vpt <= 0:
        return IMIResult(
            annual_amount=0.0,
            monthly_amount=0.0,
            rate=0.0,
            explanation="Geen VPT-waarde opgegeven.",
            next_payment="",
        )

    rate = custom_rate if custom_rate is not None else municipality_type.imi_rate
    annual = vpt * rate / 100
    payment_year = next_imi_payment_year(reference_date or date.today())

    return IMIResult(
        annual_amount=round_cents(annual),
        monthly_amount=round_cents(annual / 12),
        rate=rate,
        explanation=(
            f"IMI wordt berekend op basis van de fiscale waarde (VPT) × {rate}%. "
            "De VPT is meestal 50-70% van de marktwaarde."
        ),
        next_payment=f"Mei/Juni {payment_year}",
    )


def _irs_result(
    gross_annual_rent: float,
    rate: float,
    regime: IRSRegime,
    explanation: str,
    savings: Optional[float] = None,
    warning: Optional[str] = None,
) -> IRSResult:
    tax = gross_annual_rent * rate / 100
    return IRSResult(
        annual_tax=round_cents(tax),
        monthly_tax=round_cents(tax / 12),
        gross_annual_rent=gross_annual_rent,
        net_annual_rent=round_cents(gross_annual_rent - tax),
        net_monthly_rent=round_cents((gross_annual_rent - tax) / 12),
        rate=round_cents(rate),
        regime=regime,
        explanation=explanation,
        savings=savings,
        warning=warning,
    )


def old_regime_rate(contract_years: float, renewals: int) -> Tuple[float, str]:
    """Autonomous rate and its explanation under the pre-2026 rules, by lease length."""
    if contract_years < 2:
        return 28.0, "Korte contracten (< 2 jaar) worden belast tegen 28%."
    if contract_years < 5:
        return 25.0, "Contracten van 2-5 jaar worden belast tegen 25%."
    if contract_years < 10:
        if renewals > 0:
            discount = f"{renewals * 2}% korting voor verlengingen"
        else:
            discount = "mogelijke kortingen bij verlenging"
        return max(5.0, 15.0 - renewals * 2), f"Contracten van 5-10 jaar: 15% met {discount}."
    if contract_years < 20:
        return 10.0, "Contracten van 10-20 jaar worden belast tegen 10%."
    return 5.0, "Contracten van 20+ jaar worden belast tegen het laagste tarief van 5%."


def calculate_irs(irs_input: IRSInput) -> IRSResult:
    """
    Estimate IRS on rental income.

    The regime follows the income year: up to 2025 the rate depends on the
    lease length, 2026-2029 rents up to EUR 2,300/month pay 10 %, and later
    years fall back to 25 % with a warning.

    Args:
        irs_input: Rent, year and lease details

    Returns:
        Tax estimate with the applied regime
    """
    gross_annual_rent = irs_input.monthly_rent * 12

    if gross_annual_rent <= 0:
        return IRSResult(
            annual_tax=0.0,
            monthly_tax=0.0,
            gross_annual_rent=0.0,
            net_annual_rent=0.0,
            net_monthly_rent=0.0,
            rate=0.0,
            regime=IRSRegime.UNKNOWN,
            explanation="Geen huurinkomsten opgegeven.",
        )

    if irs_input.income_year >= 2030:
        return _irs_result(
            gross_annual_rent,
            STANDARD_RENTAL_RATE,
            IRSRegime.UNKNOWN,
            "Na 2029 is de regeling onbekend.",
            warning="Na 2029 is de regeling onzeker; plan voorzichtig en raadpleeg een fiscalist.",
        )

    if irs_input.income_year >= 2026:
        if irs_input.englobamento:
            return _irs_result(
                gross_annual_rent,
                ENGLOBAMENTO_ESTIMATE_RATE,
                IRSRegime.NEW,
                "Bij englobamento wordt je huurinkomen opgeteld bij je andere "
                "inkomsten en progressief belast (13-48%).",
                warning="Schatting: 30%. De exacte belasting hangt af van je totale "
                "inkomen. Raadpleeg een fiscalist.",
            )
        if irs_input.monthly_rent <= NEW_REGIME_RENT_CEILING:
            return _irs_result(
                gross_annual_rent,
                NEW_REGIME_REDUCED_RATE,
                IRSRegime.NEW,
                "Omdat je huur ≤ €2.300/maand is en je inkomen tussen 2026-2029 "
                "valt, betaal je slechts 10% belasting.",
                savings=gross_annual_rent
                * (STANDARD_RENTAL_RATE - NEW_REGIME_REDUCED_RATE)
                / 100,
            )
        return _irs_result(
            gross_annual_rent,
            STANDARD_RENTAL_RATE,
            IRSRegime.NEW,
            "Je huur is > €2.300/maand, waardoor het standaardtarief van 25% "
            "van toepassing is.",
        )

    rate, explanation = old_regime_rate(irs_input.contract_years, irs_input.renewals)
    if irs_input.dhd_contract:
        rate = rate * (1 - DHD_DISCOUNT)
        explanation += " DHD-contract geeft 20% korting op de belasting."
    return _irs_result(gross_annual_rent, rate, IRSRegime.OLD, explanation)


def calculate_total_portuguese_taxes(
    purchase_price: float,
    vpt: float,
    irs_input: IRSInput,
    property_type: PropertyType = PropertyType.NON_RESIDENTIAL,
    municipality_type: MunicipalityType = MunicipalityType.STANDARD,
    reference_date: Optional[date] = None,
) -> TotalTaxSummary:
    """Combine IMT, IMI and IRS into one-off and recurring totals."""
    imt = calculate_imt(purchase_price, property_type)
    imi = calculate_imi(vpt, municipality_type, reference_date=reference_date)
    irs = calculate_irs(irs_input)

    return TotalTaxSummary(
        imt=imt,
        imi=imi,
        irs=irs,
        one_off_total=imt.amount,
        annual_total=imi.annual_amount + irs.annual_tax,
        monthly_total=imi.monthly_amount + irs.monthly_tax,
    )


def estimate_vpt(purchase_price: float, percentage: float = 60) -> float:
    """Estimate the fiscal value as a share of the price, rounded to whole euros."""
    return float(math.floor(purchase_price * percentage / 100 + 0.5))
