from app.models.template import MessageTemplateRow

__all__ = ["MessageTemplateRow"]
