
class GlobalMessages:
    # General Messages
    DEMO_MESSAGE = "Hello from Express server"
    API_ENDPOINT_NOT_FOUND = "API endpoint not found"
    FRONTEND_NOT_FOUND = "Frontend build not found"

    # Contact Messages
    CONTACT_SENT = "Your message has been sent successfully. We'll get back to you soon!"
    EMAIL_NOT_CONFIGURED = "Email service is not configured. Please try again later."
    EMAIL_SEND_FAILED = "Failed to send email. Please try again later."
    INVALID_JSON = "Invalid JSON in request. Please try again."
    INVALID_REQUEST_FORMAT = "Invalid request format. Please try again."
    REQUEST_TOO_LARGE = "Request body is too large."
    CONTACT_UNEXPECTED_ERROR = "An error occurred while processing your request. Please try again later."

    # Contact Validation Messages
    NAME_REQUIRED = "Name is required"
    INVALID_EMAIL = "Invalid email address"
    MESSAGE_REQUIRED = "Message is required"
    INVALID_PHONE = "Invalid phone"
    INVALID_COMPANY = "Invalid company"
