import pytest


@pytest.fixture()
def compliant_fields() -> dict[str, str]:
    """Parsed field map of a minimal compliant payload (region I with no tax)."""
    return {
        "A": "123456789",
        "B": "987654321",
        "C": "PT",
        "D": "FT",
        "E": "N",
        "F": "20241220",
        "G": "2024/1",
        "H": "12345",
        "I1": "0",
        "N": "0.00",
        "O": "0.00",
        "Q": "ABCD",
        "R": "0001",
    }


@pytest.fixture()
def compliant_payload_text() -> str:
    return (
        "A:123456789*B:987654321*C:PT*D:FT*E:N*F:20241220*G:2024/1*H:12345*"
        "I1:0*N:0.00*O:0.00*Q:ABCD*R:0001"
    )


@pytest.fixture()
def taxed_payload_text() -> str:
    """A compliant invoice with VAT at the normal rate in region PT."""
    return (
        "A:123456789*B:987654321*C:PT*D:FT*E:N*F:20241220*G:2024/1*H:12345*"
        "I1:PT*I7:100.00*I8:23.00*N:23.00*O:123.00*Q:ABCD*R:0001"
    )
