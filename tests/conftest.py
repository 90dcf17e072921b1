"""Shared pytest fixtures and configuration for the prompto test suite.

Guidelines
----------
* No real terminal in any test — devices are in-memory streams or fakes.
* Core tests drive the Prompter through the protocols only.
* Tests must not depend on OS state.
"""

from __future__ import annotations
