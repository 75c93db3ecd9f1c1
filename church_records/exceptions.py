class ChurchRecordsError(Exception):
    status_code = 500

    def to_dict(self):
        return {"error": str(self)}


class NotFoundError(ChurchRecordsError):
    status_code = 404


class ConflictError(ChurchRecordsError):
    status_code = 409


class ValidationError(ChurchRecordsError):
    status_code = 400

    def __init__(self, fields, message="Invalid input"):
        super().__init__(message)
        self.fields = fields

    def to_dict(self):
        return {"error": str(self), "fields": self.fields}


class StorageError(ChurchRecordsError):
    status_code = 500
