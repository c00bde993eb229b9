from .fmt import format_component, format_components
from .linalg import components, divide
