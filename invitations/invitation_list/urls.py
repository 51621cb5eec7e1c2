GUESTS_URL = "/api/v1/guests"
GUEST_URL = "/api/v1/guests/{guest_id}"
HOUSEHOLDS_URL = "/api/v1/households"
HOUSEHOLD_URL = "/api/v1/households/{household_id}"
HOUSEHOLD_GUEST_URL = "/api/v1/households/{household_id}/guests/{guest_id}"
RSVP_URL = "/api/v1/households/rsvp"
