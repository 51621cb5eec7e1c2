from fastapi import APIRouter

from .features.add_guest.router import router as add_guest_router
from .features.add_guest_to_household.router import router as add_guest_to_household_router
from .features.create_household.router import router as create_household_router
from .features.get_guests.router import router as get_guests_router
from .features.get_households.router import router as get_households_router
from .features.rsvp.router import router as rsvp_router

guests_router = APIRouter()

guests_router.include_router(get_guests_router)
guests_router.include_router(add_guest_router)

households_router = APIRouter()

households_router.include_router(get_households_router)
households_router.include_router(create_household_router)
households_router.include_router(rsvp_router)
households_router.include_router(add_guest_to_household_router)
