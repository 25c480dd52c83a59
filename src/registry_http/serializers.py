"""Marshmallow schemas for the bodies this package renders itself"""

import marshmallow as ma


class BaseSerializer(ma.Schema):
    """Base serializer with which to define custom serializers."""


class ErrorDetailSerializer(BaseSerializer):
    detail = ma.fields.String(required=True)


class ErrorsSerializer(BaseSerializer):
    """Body of an error response, the form cargo reads errors from::

        {"errors": [{"detail": "Not Found"}]}
    """

    errors = ma.fields.List(ma.fields.Nested(ErrorDetailSerializer), required=True)
