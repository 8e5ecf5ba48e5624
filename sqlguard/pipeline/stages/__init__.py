"""
Pipeline stages (ordered execution flow)

1. syntax_analyzer → Balance, termination, statement structure
2. parameter_analyzer → Placeholders vs bound values (parameterized only)
3. security_analyzer → Injection idioms, host variables, comments
4. suggestion_engine → Canned remediation (verbose only)
"""
from sqlguard.pipeline.stages.syntax_analyzer import analyze_syntax
from sqlguard.pipeline.stages.parameter_analyzer import analyze_parameters
from sqlguard.pipeline.stages.security_analyzer import analyze_security
from sqlguard.pipeline.stages.suggestion_engine import generate_suggestion

__all__ = [
    # Stage 1: Syntax
    "analyze_syntax",
    # Stage 2: Parameters
    "analyze_parameters",
    # Stage 3: Security
    "analyze_security",
    # Stage 4: Suggestion
    "generate_suggestion",
]
