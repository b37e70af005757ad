from qc_service.models.employees import Employee
from qc_service.models.qc_checks import QCCheck
