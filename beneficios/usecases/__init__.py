"""Use-case layer for orchestrating benefit workflows.

Each module wraps one ``BeneficioPort`` call and converts failures into
``UseCaseError`` so screen controllers deal with a single error type.
"""
