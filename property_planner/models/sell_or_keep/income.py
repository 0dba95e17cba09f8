"""
Net rental income and net sale proceeds.

Portugal taxes only half of a resident's capital gain on real estate, and a
sale reinvested in an EU own home is exempt. Losses are never deductible.
"""

from .inputs import SellOrKeepInputs

# Share of a capital gain that is taxable for residents
TAXABLE_GAIN_SHARE = 0.5


def capital_gains_tax(
    sale_price: float,
    purchase_price: float,
    tax_rate: float,
    reinvest_exempt: bool = False,
) -> float:
    """
    Calculate Portuguese capital gains tax on a property sale.

    Args:
        sale_price: Price the property sells (or would sell) for
        purchase_price: Original purchase price
        tax_rate: Capital gains tax rate in percent
        reinvest_exempt: Whether the EU own-home reinvestment exemption applies

    Returns:
        Tax due, zero for losses or exempt sales
    """
    capital_gain = sale_price - purchase_price
    if capital_gain <= 0 or reinvest_exempt:
        return 0.0
    return capital_gain * TAXABLE_GAIN_SHARE * (tax_rate / 100)


def net_rental_income(inputs: SellOrKeepInputs) -> float:
    """
    Calculate annual rental income after costs and rental tax.

    Reserve, vacancy and management fee are percentages of gross rent and are
    subtracted together with maintenance and IMI. Rental tax only applies to
    a positive result, so a loss is never turned into a refund.

    Args:
        inputs: Property inputs

    Returns:
        Annual net rental income (negative when costs exceed rent)
    """
    annual_gross_rent = inputs.gross_monthly_rent * 12

    net_before_tax = (
        annual_gross_rent
        - annual_gross_rent * (inputs.renovation_reserve_percent / 100)
        - annual_gross_rent * (inputs.vacancy_percent / 100)
        - annual_gross_rent * (inputs.property_manager.fee_percent / 100)
        - inputs.maintenance_costs_monthly * 12
        - inputs.imi_annual
    )

    if net_before_tax > 0:
        return net_before_tax - net_before_tax * (inputs.rental_tax_rate / 100)
    return net_before_tax


def net_sale_proceeds(inputs: SellOrKeepInputs) -> float:
    """
    Calculate cash left after selling today.

    The result is negative when the debt exceeds the value net of selling
    costs; it is not clamped.

    Args:
        inputs: Property inputs

    Returns:
        Sale price minus selling costs, debt and capital gains tax
    """
    sale_costs = inputs.current_market_value * (inputs.sale_costs_percent / 100)
    gross_proceeds = inputs.current_market_value - sale_costs - inputs.remaining_debt

    tax = capital_gains_tax(
        inputs.current_market_value,
        inputs.original_purchase_price,
        inputs.capital_gains_tax_rate,
        reinvest_exempt=inputs.reinvest_in_eu_residence,
    )
    return gross_proceeds - tax
