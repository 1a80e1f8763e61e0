"""
scoring/ — PRR Scoring & Comparison Engine

Modules:
    catalog.py          - Question catalog lookup helpers
    section_scorer.py   - Per-section Yes / No / N/A tallies for one submission
    comparator.py       - Diff between two scored submissions of a service
"""
