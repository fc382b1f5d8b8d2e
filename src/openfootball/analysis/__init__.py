"""Analysis module - odds quality metrics and walk-forward backtest."""

from openfootball.analysis.metrics import OddsMetrics, evaluate_odds, outcome
from openfootball.analysis.backtest import BacktestSummary, OddsBacktester, RoundResult

__all__ = [
    "OddsMetrics",
    "evaluate_odds",
    "outcome",
    "BacktestSummary",
    "OddsBacktester",
    "RoundResult",
]
