import pytest


@pytest.fixture
def send_kwargs():
    return {
        "phone_number_id": "106540352242922",
        "access_token": "EAAG-test-token",
        "to_phone_number": "919812345678",
        "customer_name": "Asha",
        "doctor_consultation_discount": "20%",
        "doctor_coupon_code": "DOC20",
        "health_checkup_discount": "15%",
        "diagnostic_coupon_code": "DIAG15",
    }
