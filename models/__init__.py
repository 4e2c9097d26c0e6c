from models.species import Species
from models.enclosure import Enclosure, Occupant
from models.analysis import AnalysisResult, EnclosureEvaluation, ViableEnclosure
from models.audit import AuditEntry
