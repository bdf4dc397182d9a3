"""Wizard step catalog."""

from __future__ import annotations

from enum import Enum


class Step(str, Enum):
    """Identifier of a wizard step, declared in catalog order."""

    TYPE = "type"
    LIVING_AREA = "living-area"
    TOTAL_AREA = "total-area"
    FLOOR = "floor"
    LAYOUT = "layout"
    YEAR = "year"
    CONDITION = "condition"
    ENERGY_CLASS = "energy-class"
    POOL = "pool"
    GARDEN = "garden"
    ELEVATOR = "elevator"
    BALCONY = "balcony"
    GARAGE = "garage"
    LOCATION = "location"
    CONTACT = "contact"
    RESULT = "result"


# Full catalog order, used to find the nearest predecessor of a removed step
STEP_CATALOG: tuple[Step, ...] = tuple(Step)

# Amenity step -> AnswerSet field holding the yes/no answer
AMENITY_FIELDS: dict[Step, str] = {
    Step.POOL: "pool",
    Step.GARDEN: "garden",
    Step.ELEVATOR: "elevator",
    Step.BALCONY: "balcony",
    Step.GARAGE: "garage",
}

# Question shown as the step heading
STEP_TITLES: dict[Step, str] = {
    Step.TYPE: "Qual o tipo de imóvel?",
    Step.LIVING_AREA: "Qual a área útil?",
    Step.TOTAL_AREA: "Qual a área total do terreno?",
    Step.FLOOR: "Em que andar fica o apartamento?",
    Step.LAYOUT: "Qual a tipologia?",
    Step.YEAR: "Qual o ano de construção?",
    Step.CONDITION: "Qual o estado de conservação?",
    Step.ENERGY_CLASS: "Qual a classe energética?",
    Step.POOL: "Tem piscina?",
    Step.GARDEN: "Tem jardim?",
    Step.ELEVATOR: "Tem elevador?",
    Step.BALCONY: "Tem varanda?",
    Step.GARAGE: "Tem garagem?",
    Step.LOCATION: "Onde fica o imóvel?",
    Step.CONTACT: "Quase pronto!",
    Step.RESULT: "Avaliação Concluída!",
}

STEP_HINTS: dict[Step, str] = {
    Step.TYPE: "Selecione o tipo de propriedade que pretende avaliar",
    Step.LIVING_AREA: "Indique a área útil do imóvel em m²",
    Step.TOTAL_AREA: "Indique a área total (terreno incluído) em m²",
    Step.FLOOR: "Indique o número do andar (0 para rés-do-chão)",
    Step.LAYOUT: "Selecione a configuração do imóvel",
    Step.YEAR: "Indique o ano em que o imóvel foi construído",
    Step.CONDITION: "Indique o estado actual do imóvel",
    Step.ENERGY_CLASS: "Indique a classe energética do imóvel",
    Step.POOL: "Indique se a moradia tem piscina",
    Step.GARDEN: "Indique se a moradia tem jardim",
    Step.ELEVATOR: "Indique se o edifício dispõe de elevador",
    Step.BALCONY: "Indique se o apartamento dispõe de varanda ou terraço",
    Step.GARAGE: "Indique se tem lugar de estacionamento ou box",
    Step.LOCATION: "Indique a localização do seu imóvel",
    Step.CONTACT: "Deixe-nos o seu contacto para receber a avaliação",
    Step.RESULT: "Baseado nas informações fornecidas, estimamos que o valor do seu imóvel seja:",
}
