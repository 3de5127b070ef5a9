"""Basic tests to verify the package is importable and functional."""

import bifrost


def test_version():
    """Test that version is defined."""
    assert bifrost.__version__ == "0.1.0"


def test_exports():
    """Test that main exports are available."""
    assert hasattr(bifrost, "WebDriver")
    assert hasattr(bifrost, "new_driver")
    assert hasattr(bifrost, "Browser")
    assert hasattr(bifrost, "Element")
    assert hasattr(bifrost, "LocatorStrategy")
    assert hasattr(bifrost, "ProtocolError")


def test_error_hierarchy():
    assert issubclass(bifrost.EmptyIdentifierError, bifrost.MissingIdentifierError)
    assert issubclass(bifrost.MissingElementError, bifrost.MissingIdentifierError)
    assert issubclass(bifrost.ConfigurationError, bifrost.RequestConstructionError)
    for error in (
        bifrost.RequestConstructionError,
        bifrost.TransportError,
        bifrost.ProtocolError,
        bifrost.DecodeError,
        bifrost.MissingIdentifierError,
    ):
        assert issubclass(error, bifrost.BifrostError)
