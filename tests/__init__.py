"""Test package for Mind Forge.

Engine tests are pure and seed-deterministic. UI smoke tests run pygame
headlessly using the SDL dummy drivers so no real window opens. Run
``pytest`` from the project root.
"""
