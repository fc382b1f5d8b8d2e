"""
Pipeline Module

End-to-end workflow: gather → standings → odds → backtest → save.
"""

from openfootball.pipeline.runner import Pipeline

__all__ = ["Pipeline"]
