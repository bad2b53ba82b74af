"""Application-wide parameters of a fuzzy-system coevolution run."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

__all__ = ["SystemParameters", "get_parameters"]


@dataclass
class SystemParameters:
    """Every parameter of an experiment: fuzzy system, fitness weights and
    the settings of the two coevolving populations.

    Population 1 evolves the membership functions, population 2 the rules.
    Integer parameters left unset hold -1.
    """

    experiment_name: str = ""
    dataset_name: str = ""
    save_path: str = "./"

    verbose: bool = False
    regression: bool = False
    classification: bool = False

    # Fuzzy system
    fixed_vars: bool = False
    nb_rules: int = -1
    nb_var_per_rule: int = -1
    nb_in_vars: int = -1
    nb_out_vars: int = -1
    nb_in_sets: int = -1
    nb_out_sets: int = -1
    in_vars_code_size: int = -1
    out_vars_code_size: int = -1
    in_sets_code_size: int = -1
    out_sets_code_size: int = -1
    in_sets_pos_code_size: int = -1
    out_set_pos_code_size: int = -1
    nb_cooperators: int = 2

    # Fitness weights
    sensi_w: float = 0.0
    speci_w: float = 0.0
    accuracy_w: float = 0.0
    ppv_w: float = 0.0
    rmse_w: float = 0.0
    rrse_w: float = 0.0
    rae_w: float = 0.0
    mse_w: float = 0.0
    distance_threshold_w: float = 0.0
    distance_min_threshold_w: float = 0.0
    thresh_activated: bool = True
    dont_care_w: float = 0.0
    over_learn_w: float = 0.0

    threshold: list[float] = field(default_factory=list)

    # Population 1: membership functions
    max_gen_pop1: int = -1
    max_fit_pop1: float = 1.0
    elite_size_pop1: int = -1
    pop_size_pop1: int = -1
    cx_prob_pop1: float = -1.0
    mut_flip_ind_pop1: float = -1.0
    mut_flip_bit_pop1: float = -1.0

    # Population 2: rules
    max_gen_pop2: int = -1
    max_fit_pop2: float = 1.0
    elite_size_pop2: int = -1
    pop_size_pop2: int = -1
    cx_prob_pop2: float = -1.0
    mut_flip_ind_pop2: float = -1.0
    mut_flip_bit_pop2: float = -1.0

    def set_nb_out_vars(self, value: int) -> None:
        """Set the number of output variables and size the thresholds to it."""
        self.resize_threshold(value)
        self.nb_out_vars = value

    def set_threshold_value(self, pos: int, value: float) -> None:
        """Replace the threshold of output variable ``pos``."""
        self._check_position(pos)
        self.threshold[pos] = float(value)

    def threshold_value(self, pos: int) -> float:
        """Return the threshold of output variable ``pos``."""
        self._check_position(pos)
        return self.threshold[pos]

    def resize_threshold(self, size: int) -> None:
        """Truncate the thresholds or pad them with zeros to ``size`` values."""
        if size < 0:
            raise ValueError(f"threshold size must not be negative: {size}")
        del self.threshold[size:]
        self.threshold.extend([0.0] * (size - len(self.threshold)))

    def _check_position(self, pos: int) -> None:
        if not 0 <= pos < len(self.threshold):
            raise IndexError(
                f"threshold position {pos} out of range 0..{len(self.threshold) - 1}"
            )


_instance: SystemParameters | None = None
_instance_lock = threading.Lock()


def get_parameters() -> SystemParameters:
    """Return the process-wide parameters, creating them on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = SystemParameters()
        return _instance