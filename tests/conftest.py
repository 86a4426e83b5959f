"""
Shared fixtures: sample rate confirmation texts and the API client.
"""

import pytest
from fastapi.testclient import TestClient

from ratecon.main import app


MULTI_STOP_DOC = """ACME LOGISTICS RATE CONFIRMATION
Load #: 7781234
Carrier: Fast Freight LLC
Weight: 45,000 lbs
Total: $1,250.00 USD
Stop #1: Pickup
ACME Foods
1200 Industrial Blvd, Chicago, IL 60601
Date: 03/15/2024 Time: 08:00 CST
Stop #2: Delivery
Big Box Store DC
4500 Commerce St, Dallas, TX 75201
Date: 03/17/2024 Appt: 1400
"""

NUMBERED_DOC = """Shipper - Pickup 1 of 2
Warehouse A
100 Main St, Joliet, IL 60431
03/14/2024 09:00
Shipper - Pickup 2 of 2
Warehouse B
200 Oak Ave, Gary, IN 46402
03/14/2024 13:00
Consignee - Delivery 1 of 2
Store One
300 Elm St, Memphis, TN 38103
03/16/2024 10:00
Consignee - Delivery 2 of 2
Store Two
400 Pine Rd, Atlanta, GA 30303
03/17/2024 FCFS
"""

GENERIC_DOC = """Shipper: ACME Foods
123 Main St, Springfield, IL 62701
Pickup Date: 03/15/2024
Consignee: Big Store
77 Lake Rd, Madison, WI 53703
Delivery Time: 2:00 PM EST
"""

TWO_SHIPPER_DOC = """Shipper: ACME Foods
123 Main St, Springfield, IL 62701
Pickup Date: 03/15/2024
Shipper: Beta Mills
55 River Rd, Omaha, NE 68102
Pickup Date: 03/16/2024
Consignee: Big Store
77 Lake Rd, Madison, WI 53703
"""


@pytest.fixture
def multi_stop_doc():
    return MULTI_STOP_DOC


@pytest.fixture
def numbered_doc():
    return NUMBERED_DOC


@pytest.fixture
def generic_doc():
    return GENERIC_DOC


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def two_shipper_doc():
    return TWO_SHIPPER_DOC
