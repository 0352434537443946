"""Fuzz testing infrastructure for schemelex.

This package contains:
- shadow_decoder: Simple reference decoder for differential testing
- test_reader_oracle: State machine fuzzer using RuleBasedStateMachine

Python 3.13+.
"""
