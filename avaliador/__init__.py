"""
avaliador - Property valuation wizard

Multi-step questionnaire that estimates the market value of a house or
apartment from its characteristics and location.

Modules:
    - core: Settings, logging and exceptions
    - domain: Answer/step/reference models, step sequencer and valuation engine
    - application: Wizard state updates, reference data loading, submission
    - ui: Streamlit pages and UI components
"""

__version__ = "1.2.0"
