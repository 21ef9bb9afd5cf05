# import every model so Base.metadata knows all tables
from .properties.properties import Property
from .properties.units import Unit
from .leasing_tenants.residents import Resident
from .leasing_tenants.leases import Lease
from .leasing_tenants.lease_payments import LeasePayment
from .financials.payment_types import PaymentType
from .financials.payment_categories import PaymentCategory
from .financials.expenses import Expense
from .financials.expense_types import ExpenseType
from .financials.fine_types import FineType
from .financials.fines import Fine
from .financials.utility_types import UtilityType
from .financials.utilities import Utility
from .maintenance.inspection_types import InspectionType
from .maintenance.inspections import Inspection
