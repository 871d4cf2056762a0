"""shipcalc — interactive shipping-cost calculator.

Shipping methods are interchangeable cost strategies injected into a
delivery context at runtime.
"""

from shipcalc.version import __version__

__all__: list[str] = ["__version__"]
