from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer


class Envelope(BaseModel):
    """Response body that leaves out optional fields the upstream did not fill.

    Only top-level ``None`` fields are dropped; anything nested in ``result``
    is passed on as sent.
    """

    @model_serializer(mode="wrap")
    def _omit_empty_optionals(self, handler: SerializerFunctionWrapHandler):
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}
