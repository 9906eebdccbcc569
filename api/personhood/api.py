"""
The personhood API module
"""

from django.http import HttpResponse
from ninja_extra import NinjaExtraAPI

from worldid.api import router as worldid_router


def health(request):
    return HttpResponse("Ok")


worldid_api = NinjaExtraAPI(
    urls_namespace="worldid",
    title="World ID verification API",
    version="1.0.0",
    docs_url="/worldid/docs",
    openapi_url="/worldid/openapi.json",
    description="""
Proof of personhood with World ID:\n
1. `POST /worldid/init` returns the signal and the World ID verification url\n
2. `POST /worldid/verify` submits the proof generated by the World App\n
3. `GET /worldid/status` returns the verification status of the account
""",
)

worldid_api.add_router("/worldid/", worldid_router, tags=["World ID"])


apis = [
    worldid_api,
]
