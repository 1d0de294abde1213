from app.config import IS_DEV, env_variable


class ErrorMessages:
    @staticmethod
    def default(task: str, e: Exception):
        if IS_DEV and env_variable("SHOW_DETAILED_ERROR_MESSAGES"):
            return f"ERROR {task}: {str(e)}"

        return f"An error occurred during {task}. Please try again later."

    REQUIRED_FIELDS_MISSING = "Required field(s) missing"
    NO_TEXT_TO_TRANSLATE = "No text to translate"
    REQUEST_TIMED_OUT = "Server failed to process the request on time"
