from marshmallow import Schema, fields, validate, pre_load, post_load, EXCLUDE
from qc_service.utils.validators import sanitize_fields

TEXT_FIELDS = ('part_code', 'part_name', 'vendor_name', 'vendor_id', 'vendor_type',
               'approved_by', 'data_from', 'status', 'remark')


class QCCheckCreateSchema(Schema):
    """Body of POST /qc-checks. Only part_code and production_date are enforced."""

    class Meta:
        unknown = EXCLUDE

    part_code = fields.Str(required=True, validate=validate.Length(min=1))
    part_name = fields.Str(load_default=None, allow_none=True)
    vendor_name = fields.Str(load_default=None, allow_none=True)
    vendor_id = fields.Str(load_default=None, allow_none=True)
    vendor_type = fields.Str(load_default=None, allow_none=True)
    production_date = fields.Date(required=True)
    # Free-text approver name, resolved to an employee id at write time
    approved_by = fields.Str(load_default=None, allow_none=True)
    data_from = fields.Str(load_default=None, allow_none=True)

    @pre_load
    def sanitize(self, data, **kwargs):
        return sanitize_fields(data, TEXT_FIELDS)

    @post_load
    def blank_to_none(self, data, **kwargs):
        for key in ('part_name', 'vendor_name', 'vendor_id', 'vendor_type', 'approved_by', 'data_from'):
            if not data.get(key):
                data[key] = None
        return data


class QCCheckPatchSchema(Schema):
    """Body of PUT /qc-checks/<id>.

    Loads into a patch: only keys with a non-null value survive, so an omitted
    or null field leaves the stored value unchanged while "" overwrites it.
    """

    class Meta:
        unknown = EXCLUDE

    part_code = fields.Str(allow_none=True)
    part_name = fields.Str(allow_none=True)
    vendor_name = fields.Str(allow_none=True)
    vendor_id = fields.Str(allow_none=True)
    vendor_type = fields.Str(allow_none=True)
    production_date = fields.Date(allow_none=True)
    status = fields.Str(allow_none=True)
    remark = fields.Str(allow_none=True)

    @pre_load
    def sanitize(self, data, **kwargs):
        return sanitize_fields(data, TEXT_FIELDS)

    @post_load
    def to_patch(self, data, **kwargs):
        return {k: v for k, v in data.items() if v is not None}


class QCCheckFilterSchema(Schema):
    """Query string of GET /qc-checks. Blank parameters count as absent."""

    class Meta:
        unknown = EXCLUDE

    status = fields.Str(load_default=None)
    date_from = fields.Date(load_default=None)
    date_to = fields.Date(load_default=None)
    part_code = fields.Str(load_default=None)
    data_from = fields.Str(load_default=None)

    @pre_load
    def drop_blank(self, data, **kwargs):
        data = sanitize_fields(data, ('status', 'part_code', 'data_from'))
        return {k: v for k, v in data.items() if v not in (None, '')}
