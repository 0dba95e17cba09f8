"""
Dutch and Portuguese label tables for the Sell-or-Keep analysis.

Field keys match the ``SellOrKeepInputs`` field names so a client can render
a form straight from the model. Option keys match the enum values.
"""

import copy
from enum import Enum
from typing import Any, Dict


class Language(str, Enum):
    """Supported interface and report languages."""

    NL = "nl"
    PT = "pt"


TRANSLATIONS: Dict[Language, Dict[str, Any]] = {
    Language.NL: {
        "title": "Verkopen of Behouden?",
        "subtitle": "Portugese Vastgoed Analyzer",
        "report_slug": "verkopen-of-behouden-analyse",
        "generated_on": "Gegenereerd op",
        "years": "jaar",
        "sections": {
            "basic_data": "Basisgegevens Pand",
            "financing": "Financiering",
            "rental": "Huur & Bedrijfskosten",
            "taxes": "Belastingen Portugal",
            "assumptions": "Aannames & Doelen",
        },
        "fields": {
            "current_market_value": {
                "label": "Huidige marktwaarde",
                "tooltip": "De geschatte waarde van je pand bij verkoop vandaag.",
            },
            "original_purchase_price": {
                "label": "Oorspronkelijke aankoopprijs",
                "tooltip": "De prijs die je hebt betaald bij aankoop van het pand.",
            },
            "purchase_date": {
                "label": "Aankoopdatum",
                "tooltip": "Datum van aankoop, belangrijk voor de vermogenswinstbelasting.",
            },
            "cadastral_value": {
                "label": "Cadastrale waarde (VPT)",
                "tooltip": "Valor Patrimonial Tributário: de fiscale waarde van je pand, te vinden op je IMI-aanslag.",
            },
            "rental_type": {
                "label": "Type verhuur",
                "tooltip": "Langlopend is traditionele jaarhuur, vakantieverhuur (AL) is korte termijn.",
            },
            "remaining_debt": {
                "label": "Restschuld hypotheek",
                "tooltip": "Het bedrag dat je nog moet aflossen op je hypotheek.",
            },
            "mortgage_rate": {
                "label": "Hypotheekrente",
                "tooltip": "Je huidige jaarlijkse hypotheekrente.",
            },
            "mortgage_type": {
                "label": "Hypotheektype",
                "tooltip": "Aflossingsvrij betaalt alleen rente, annuïtair betaalt rente en aflossing.",
            },
            "remaining_years": {
                "label": "Resterende looptijd",
                "tooltip": "Aantal jaren tot je hypotheek is afgelost.",
            },
            "gross_monthly_rent": {
                "label": "Brutohuur per maand",
                "tooltip": "Je totale maandelijkse huurinkomsten vóór kosten.",
            },
            "maintenance_costs_monthly": {
                "label": "Onderhoudskosten per maand",
                "tooltip": "Gemiddelde maandelijkse kosten voor onderhoud en reparaties.",
            },
            "renovation_reserve_percent": {
                "label": "Renovatie-reserve",
                "tooltip": "Percentage van de huur dat je reserveert voor grote renovaties.",
            },
            "vacancy_percent": {
                "label": "Leegstand",
                "tooltip": "Geschat percentage van het jaar dat je pand leeg staat.",
            },
            "property_manager": {
                "label": "Property manager",
                "tooltip": "Zelf beheren kost 0%, langlopend beheer ~10%, vakantieverhuur 20-30%.",
            },
            "imi_annual": {
                "label": "IMI-belasting",
                "tooltip": "Imposto Municipal sobre Imóveis: jaarlijkse gemeentelijke belasting (0.3-0.8% van de VPT).",
            },
            "rental_tax_rate": {
                "label": "Belasting huurinkomsten",
                "tooltip": "Autonoom is vast 28%, progressief hangt af van je totale inkomen.",
            },
            "sale_costs_percent": {
                "label": "Verkoopkosten bij verkoop",
                "tooltip": "Makelaar, notaris en certificaten. Typisch 5-8%.",
            },
            "capital_gains_tax_rate": {
                "label": "Vermogenswinstbelasting",
                "tooltip": "Autonoom is 28% over 50% van de winst.",
            },
            "reinvest_in_eu_residence": {
                "label": "Herinvestering in EU-hoofdverblijf?",
                "tooltip": "Herinvestering in je eigen woning binnen de EU binnen 36 maanden is vrijgesteld.",
            },
            "annual_growth_percent": {
                "label": "Jaarlijkse huur- en waardegroei",
                "tooltip": "Verwachte jaarlijkse stijging van huur en waarde. Portugees gemiddelde: 3-4%.",
            },
            "alternative_return_percent": {
                "label": "Alternatief beleggingsrendement",
                "tooltip": "Verwacht rendement van bijvoorbeeld een MSCI World ETF. Historisch ~7-8%.",
            },
            "investment_horizon": {
                "label": "Investeringshorizon",
                "tooltip": "Over hoeveel jaar wil je de scenario's vergelijken?",
            },
            "primary_goal": {
                "label": "Primair doel",
                "tooltip": "Wat is je belangrijkste financiële doel met dit pand?",
            },
            "risk_profile": {
                "label": "Risicoprofiel",
                "tooltip": "Hoeveel risico ben je bereid te nemen?",
            },
        },
        "options": {
            "longterm": "Langlopende verhuur",
            "vacation": "Vakantieverhuur (AL)",
            "interest_only": "Aflossingsvrij",
            "annuity": "Annuïtair",
            "self": "Zelf beheren",
            "pm_longterm": "Beheerder langlopend (10%)",
            "pm_vacation": "Beheerder vakantie (25%)",
            "autonomous": "Autonoom",
            "progressive": "Progressief",
            "cashflow": "Maximale cashflow",
            "networth": "Vermogensopbouw",
            "pension": "Pensioen",
            "legacy": "Nalatenschap",
            "low": "Laag",
            "medium": "Gemiddeld",
            "high": "Hoog",
        },
        "scenarios": {
            "A": "Verkopen + ETF",
            "B": "Verkopen + Nieuw Vastgoed",
            "C": "Behouden als Huurwoning",
        },
        "results": {
            "title": "Scenario Resultaten",
            "monthly_income": "Maandelijks inkomen",
            "final_net_worth": "Netto vermogen na horizon",
            "total_cashflow_received": "Totale cashflow",
            "irr": "Geschat rendement (IRR)",
            "legacy_years": "Legacy: jaren FI voor kinderen",
            "cashflow_stability": "Cashflow-stabiliteit",
            "fiscal_predictability": "Fiscale voorspelbaarheid",
            "operational_complexity": "Operationele complexiteit",
        },
        "stress": {
            "title": "Stresstest",
            "scenario": "Scenario",
            "base_case": "Basis",
            "rate_increase": "Rente +2%",
            "vacancy_increase": "Leegstand +5%",
            "zero_growth": "Geen groei",
        },
        "advice": {
            "title": "Persoonlijk Advies",
            "best_for_goal": "Beste voor je doel",
            "best_overall": "Beste totaalscore",
            "tradeoffs": "Belangrijke overwegingen",
            "risks": "Risico's",
            "disclaimer": "Dit advies is niet-bindend en dient alleen ter oriëntatie. Raadpleeg altijd een fiscalist of financieel adviseur.",
        },
    },
    Language.PT: {
        "title": "Vender ou Manter?",
        "subtitle": "Analisador de Imóveis em Portugal",
        "report_slug": "vender-ou-manter-analise",
        "generated_on": "Gerado em",
        "years": "anos",
        "sections": {
            "basic_data": "Dados Básicos do Imóvel",
            "financing": "Financiamento",
            "rental": "Renda & Custos Operacionais",
            "taxes": "Impostos Portugal",
            "assumptions": "Pressupostos & Objetivos",
        },
        "fields": {
            "current_market_value": {
                "label": "Valor de mercado atual",
                "tooltip": "O valor estimado do seu imóvel se vendido hoje.",
            },
            "original_purchase_price": {
                "label": "Preço de compra original",
                "tooltip": "O preço que pagou quando comprou o imóvel.",
            },
            "purchase_date": {
                "label": "Data de compra",
                "tooltip": "Data da compra, importante para o cálculo de mais-valias.",
            },
            "cadastral_value": {
                "label": "Valor Patrimonial Tributário (VPT)",
                "tooltip": "O valor fiscal do seu imóvel. Encontra-se na nota de IMI.",
            },
            "rental_type": {
                "label": "Tipo de arrendamento",
                "tooltip": "Longa duração é o arrendamento tradicional, Alojamento Local (AL) é curta duração.",
            },
            "remaining_debt": {
                "label": "Dívida hipotecária",
                "tooltip": "O montante que ainda tem de pagar da hipoteca.",
            },
            "mortgage_rate": {
                "label": "Taxa de juro",
                "tooltip": "A sua taxa de juro anual atual.",
            },
            "mortgage_type": {
                "label": "Tipo de hipoteca",
                "tooltip": "Só juros paga apenas juros, amortização paga juros e capital.",
            },
            "remaining_years": {
                "label": "Prazo restante",
                "tooltip": "Anos até a hipoteca estar paga.",
            },
            "gross_monthly_rent": {
                "label": "Renda bruta mensal",
                "tooltip": "As suas receitas totais de renda antes dos custos.",
            },
            "maintenance_costs_monthly": {
                "label": "Custos de manutenção mensais",
                "tooltip": "Custos médios mensais de manutenção e reparações.",
            },
            "renovation_reserve_percent": {
                "label": "Reserva para renovações",
                "tooltip": "Percentagem da renda que reserva para grandes renovações.",
            },
            "vacancy_percent": {
                "label": "Taxa de vacância",
                "tooltip": "Percentagem estimada do ano em que o imóvel está vazio.",
            },
            "property_manager": {
                "label": "Gestor de propriedade",
                "tooltip": "Autogestão 0%, longa duração ~10%, curta duração 20-30%.",
            },
            "imi_annual": {
                "label": "IMI",
                "tooltip": "Imposto Municipal sobre Imóveis: imposto anual (0.3-0.8% do VPT).",
            },
            "rental_tax_rate": {
                "label": "Tributação de rendas",
                "tooltip": "Autónoma é taxa fixa de 28%, englobamento depende do rendimento total.",
            },
            "sale_costs_percent": {
                "label": "Custos de venda",
                "tooltip": "Comissão imobiliária, notário e certificados. Tipicamente 5-8%.",
            },
            "capital_gains_tax_rate": {
                "label": "Mais-valias",
                "tooltip": "Autónoma é 28% sobre 50% do ganho.",
            },
            "reinvest_in_eu_residence": {
                "label": "Reinvestimento em habitação própria UE?",
                "tooltip": "Reinvestimento em habitação própria na UE dentro de 36 meses isenta de mais-valias.",
            },
            "annual_growth_percent": {
                "label": "Crescimento anual de renda e valor",
                "tooltip": "Aumento anual esperado de renda e valor. Média Portugal: 3-4%.",
            },
            "alternative_return_percent": {
                "label": "Retorno de investimento alternativo",
                "tooltip": "Retorno esperado de um ETF MSCI World. Histórico ~7-8%.",
            },
            "investment_horizon": {
                "label": "Horizonte de investimento",
                "tooltip": "Em quantos anos quer comparar os cenários?",
            },
            "primary_goal": {
                "label": "Objetivo principal",
                "tooltip": "Qual é o seu principal objetivo financeiro com este imóvel?",
            },
            "risk_profile": {
                "label": "Perfil de risco",
                "tooltip": "Quanto risco está disposto a assumir?",
            },
        },
        "options": {
            "longterm": "Arrendamento de longa duração",
            "vacation": "Alojamento Local (AL)",
            "interest_only": "Só juros",
            "annuity": "Amortização",
            "self": "Autogestão",
            "pm_longterm": "Gestor longa duração (10%)",
            "pm_vacation": "Gestor curta duração (25%)",
            "autonomous": "Autónoma",
            "progressive": "Englobamento",
            "cashflow": "Máximo cash flow",
            "networth": "Crescimento de património",
            "pension": "Reforma",
            "legacy": "Legado",
            "low": "Baixo",
            "medium": "Médio",
            "high": "Alto",
        },
        "scenarios": {
            "A": "Vender + ETF",
            "B": "Vender + Novo Imóvel",
            "C": "Manter como Arrendamento",
        },
        "results": {
            "title": "Resultados dos Cenários",
            "monthly_income": "Rendimento mensal",
            "final_net_worth": "Património líquido no horizonte",
            "total_cashflow_received": "Cash flow total",
            "irr": "Retorno estimado (TIR)",
            "legacy_years": "Legado: anos de IF para filhos",
            "cashflow_stability": "Estabilidade de cash flow",
            "fiscal_predictability": "Previsibilidade fiscal",
            "operational_complexity": "Complexidade operacional",
        },
        "stress": {
            "title": "Teste de stress",
            "scenario": "Cenário",
            "base_case": "Base",
            "rate_increase": "Juros +2%",
            "vacancy_increase": "Vacância +5%",
            "zero_growth": "Sem crescimento",
        },
        "advice": {
            "title": "Conselho Pessoal",
            "best_for_goal": "Melhor para o seu objetivo",
            "best_overall": "Melhor pontuação global",
            "tradeoffs": "Considerações importantes",
            "risks": "Riscos",
            "disclaimer": "Este conselho não é vinculativo e serve apenas para orientação. Consulte sempre um fiscalista ou consultor financeiro.",
        },
    },
}


def get_translations(language: Language) -> Dict[str, Any]:
    """Return a copy of the label table for a language."""
    return copy.deepcopy(TRANSLATIONS[Language(language)])
