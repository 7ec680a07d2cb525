"""
Documentation snippet per model: how the same system could be solved with scipy.

The text is a template for display only. It is never executed and says nothing
about the engine's own output.
"""

from typing import Union

from odegallery.catalog import get_model
from odegallery.core.descriptor import ModelDescriptor

SNIPPET_TEMPLATE = """from scipy.integrate import odeint
import numpy as np
import matplotlib.pyplot as plt

# {name}
def model(y, t):
    # {equation}
    return dydt

t = np.linspace({t0:g}, {t_end:g}, {n_points})
y0 = [{initial}]
sol = odeint(model, y0, t)

plt.plot(t, sol)
plt.xlabel('{xlabel}')
plt.ylabel('{ylabel}')
plt.show()"""


def render_snippet(model: Union[str, ModelDescriptor]) -> str:
    """Fill the scipy odeint template with a model's name, equation, domain and labels."""
    d = model if isinstance(model, ModelDescriptor) else get_model(model)
    return SNIPPET_TEMPLATE.format(
        name=d.display_name,
        equation=d.equation_text,
        t0=d.time_domain.t0,
        t_end=d.time_domain.t_end,
        n_points=10 * d.time_domain.n_steps,
        initial=", ".join(f"{value:g}" for _, value in d.initial_state),
        xlabel=d.axis_labels.x,
        ylabel=d.axis_labels.y,
    )
