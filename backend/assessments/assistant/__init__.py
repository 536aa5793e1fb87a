from .explanation import build_greeting, build_result_explanation
from .responder import find_faq_response, reply
