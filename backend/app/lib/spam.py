from app.lib.contact_models import SubmissionRequest


def is_bot(request: SubmissionRequest) -> bool:
    # the honeypot input is hidden from people; only form-filling bots put anything in it
    return bool(request.honeypot)
