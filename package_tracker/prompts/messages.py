"""Bot message text for every turn of the conversation."""

from package_tracker.schemas.package_schema import PackageRecord

MAIN_MENU_OPTIONS = "1. Track a package\n2. Report a lost package\n3. Speak with an agent"

GREETING = f"Hi! How can I help you today? \n{MAIN_MENU_OPTIONS}"
FOLLOW_UP_MENU = f"Is there anything else I can help you with? \n{MAIN_MENU_OPTIONS}"
START_OVER = f"No problem! Let's start fresh.\n\nWhat would you like to do?\n{MAIN_MENU_OPTIONS}"
STATE_RECOVERED = (
    "I seem to have lost track of our conversation. Let me restart. "
    f"\n\nWhat would you like to do?\n{MAIN_MENU_OPTIONS}"
)
GREETING_NOT_UNDERSTOOD = (
    "I didn't quite understand that. Could you please choose one of the following "
    f"options?\n\n{MAIN_MENU_OPTIONS}."
)

EMPTY_INPUT = "I didn't receive an input. Could you please type your response?"
CHOICE_NOT_UNDERSTOOD = (
    "I didn't understand that response. Could you please choose from the available options?"
)

ASK_TRACKING_NUMBER = "Great! Please provide your tracking number.\n\n(Format: TST followed by 6 digits)"
ASK_TRACKING_NUMBER_AGAIN = "Please provide your tracking number.\n\n(Format: TST followed by 6 digits)"
ASK_LOST_TRACKING_NUMBER = (
    "I'm sorry to hear your package might be lost. Let me help you with that."
    "\n\nFirst, what's your tracking number?"
)
INVALID_TRACKING_NUMBER = (
    "Hmm, that doesn't look like a valid tracking number.\n\n"
    "Tracking numbers should be in the format TST followed by six numbers.\n\n"
    "Could you please check and re-enter your tracking number?"
)
INVALID_LOST_TRACKING_NUMBER = (
    "I need a valid tracking number to help report a lost package. \n\n"
    "Please provide your tracking number (format: TST followed by six numbers)."
)

ASK_EMAIL_FOR_CLAIM = "To file a claim, I'll need to verify your email address.\n\nPlease provide your email:"
INVALID_EMAIL = (
    "That does not appear to be a valid email address. \n\n"
    "Please enter your email address in the format: example@gmail.com"
)
EMAIL_NOT_RECOGNIZED = "I do not recognize this email. Could you check the spelling and try again?"
EMAIL_HAS_ACTIVE_ORDER = (
    "It seems that there is an active order for this email. "
    "Could you check the tracking number and try again?"
)

CONNECTING_TO_AGENT = "Connecting you to an agent... Please hold."
CONNECTING_TO_LIVE_AGENT = "Connecting you to a live agent... Please hold."

NOT_FOUND_OPTIONS = (
    "Would you like to:\n1. Try another tracking number\n"
    "2. Provide your email to search by order\n3. Speak with an agent"
)


def tracking_lost(pkg: PackageRecord) -> str:
    return (
        f"Your package, {pkg.tracking_number}, appears to be marked as lost. \n\n"
        f"Last known location: {pkg.last_known_location}\n"
        f"Last seen: {pkg.last_seen_date}\n"
        f"Carrier: {pkg.carrier} \n\n"
        "Would you like to:\n1. File a claim \n2. Speak with an agent \n3. Start over"
    )


def tracking_delivered(pkg: PackageRecord) -> str:
    return (
        f"Your package ({pkg.tracking_number}) was delivered. \n\n"
        f"Status: {pkg.status.value}\n"
        f"Location: {pkg.delivered_location}\n"
        f"Delivered: {pkg.delivered_date}\n"
        f"Carrier: {pkg.carrier} \n\n"
        "If you didn't receive it, please let me know and I can help you report it "
        "or you can speak to one of our agents. \n\n"
        "Respond with: \n1. File a claim \n2. Speak with an agent \n3. Start over"
    )


def tracking_in_transit(pkg: PackageRecord) -> str:
    return (
        "Here's the current status of your package: \n\n"
        f"Tracking: {pkg.tracking_number}\n"
        f"Status: {pkg.status.value}\n"
        f"Current Location: {pkg.current_location}\n"
        f"Estimated Delivery: {pkg.estimated_delivery}\n"
        f"Carrier: {pkg.carrier} \n\n"
        "Your package is on its way!"
    )


def tracking_not_found(tracking_number: str) -> str:
    return (
        f"I couldn't find a package with tracking number {tracking_number}. \n\n"
        "This could mean:\n"
        "• The tracking number was entered incorrectly\n"
        "• The package hasn't been scanned yet\n"
        "• It's from a different carrier \n\n"
        f"{NOT_FOUND_OPTIONS}"
    )


def lost_report_delivered(pkg: PackageRecord) -> str:
    return (
        f"I see that package {pkg.tracking_number} shows as delivered on "
        f"{pkg.delivered_date} to {pkg.delivered_location}. \n\n"
        "If you didn't receive it, I can help you file a missing package claim. \n\n"
        "To proceed, I'll need your email address:"
    )


def lost_report_already_lost(pkg: PackageRecord) -> str:
    return (
        f"This package ({pkg.tracking_number}) is already marked as lost in our system. \n\n"
        f"Last known location: {pkg.last_known_location}\n"
        f"Last seen: {pkg.last_seen_date}\n"
        f"Carrier: {pkg.carrier} \n\n"
        "Would you like to file a claim or speak with an agent?\n"
        "1. File a claim\n2. Speak with an agent"
    )


def lost_report_in_transit(pkg: PackageRecord) -> str:
    return (
        f"I found your package {pkg.tracking_number}. It's currently: \n\n"
        f"Status: {pkg.status.value}\n"
        f"Location: {pkg.current_location}\n"
        f"Estimated Delivery: {pkg.estimated_delivery}\n"
        f"Carrier: {pkg.carrier} \n\n"
        "Since it's still in transit, we recommend waiting for delivery. However, "
        "I can also help you with the following: \n"
        "1. File a preemptive claim\n2. Speak with an agent \n3. Start over"
    )


def lost_report_not_found(tracking_number: str) -> str:
    return (
        f"I couldn't find tracking number {tracking_number} in our system. \n\n"
        "This might mean:\n"
        "• The number was entered incorrectly\n"
        "• It's from a different carrier\n"
        "• The package hasn't been scanned yet \n\n"
        f"{NOT_FOUND_OPTIONS}"
    )


def claim_confirmed(case_number: str, email: str, response_hours: int) -> str:
    return (
        "Email verified successfully! \n\n"
        "Now I can proceed with filing your claim for a refund or reshipment. "
        f"Your case number is #{case_number}. \n\n"
        f"You'll receive updates at {email} within {response_hours} hours."
    )
