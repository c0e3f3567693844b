"""
sportfit — sport recommendations from athlete physical metrics.

Scores an athlete's metric snapshot against a catalogue of sport profiles,
ranks the best matches and explains them. See ``sportfit.recommendations``
for the engine and ``sportfit.cli`` for the command line.
"""

__version__ = "1.0.0"
