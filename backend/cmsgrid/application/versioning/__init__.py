from .publish import publish_record, unpublish_record
