"""
Application Layer for the CoachHub API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Workflows orchestrating ports (complete workout, mark day complete)
- exceptions.py: Error taxonomy shared by every layer
- tasks.py: Best-effort task runner for non-critical side effects
"""
