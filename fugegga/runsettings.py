"""Settings of one coevolution run and how they reach the system parameters."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .parameters import SystemParameters

__all__ = ["RunSettings", "apply_run_settings"]


@dataclass
class RunSettings:
    """Every value an experiment script hands over before a run.

    Population 1 evolves the membership functions, population 2 the rules.
    """

    experiment_name: str
    save_path: str
    fixed_vars: bool
    nb_rules: int
    nb_max_var_per_rule: int
    nb_out_vars: int
    nb_in_sets: int
    nb_out_sets: int
    in_vars_code_size: int
    out_vars_code_size: int
    in_sets_code_size: int
    out_sets_code_size: int
    in_sets_pos_code_size: int
    out_set_pos_code_size: int
    max_gen_pop1: int
    max_fit_pop1: float
    elite_pop1: int
    pop_size_pop1: int
    cx_prob_pop1: float
    mut_flip_ind_pop1: float
    mut_flip_bit_pop1: float
    max_gen_pop2: int
    max_fit_pop2: float
    elite_pop2: int
    pop_size_pop2: int
    cx_prob_pop2: float
    mut_flip_ind_pop2: float
    mut_flip_bit_pop2: float
    sensi_w: float
    speci_w: float
    accuracy_w: float
    ppv_w: float
    rmse_w: float
    rrse_w: float
    rae_w: float
    mse_w: float
    distance_threshold_w: float
    distance_min_threshold_w: float
    dont_care_w: float
    over_learn_w: float
    thresh: float
    thresh_activated: bool


def apply_run_settings(params: SystemParameters, settings: RunSettings) -> None:
    """Copy ``settings`` into ``params``, creating the save directory if needed.

    The save path is stored with a trailing ``/`` and every output variable
    receives the same threshold.
    """
    Path(settings.save_path).mkdir(parents=True, exist_ok=True)

    params.experiment_name = settings.experiment_name
    params.save_path = settings.save_path + "/"
    params.fixed_vars = bool(settings.fixed_vars)
    params.nb_rules = int(settings.nb_rules)
    params.nb_var_per_rule = int(settings.nb_max_var_per_rule)
    params.set_nb_out_vars(int(settings.nb_out_vars))
    params.nb_in_sets = int(settings.nb_in_sets)
    params.nb_out_sets = int(settings.nb_out_sets)
    params.in_vars_code_size = int(settings.in_vars_code_size)
    params.out_vars_code_size = int(settings.out_vars_code_size)
    params.in_sets_code_size = int(settings.in_sets_code_size)
    params.out_sets_code_size = int(settings.out_sets_code_size)
    params.in_sets_pos_code_size = int(settings.in_sets_pos_code_size)
    params.out_set_pos_code_size = int(settings.out_set_pos_code_size)

    params.max_gen_pop1 = int(settings.max_gen_pop1)
    params.max_fit_pop1 = float(settings.max_fit_pop1)
    params.elite_size_pop1 = int(settings.elite_pop1)
    params.pop_size_pop1 = int(settings.pop_size_pop1)
    params.cx_prob_pop1 = float(settings.cx_prob_pop1)
    params.mut_flip_ind_pop1 = float(settings.mut_flip_ind_pop1)
    params.mut_flip_bit_pop1 = float(settings.mut_flip_bit_pop1)

    params.max_gen_pop2 = int(settings.max_gen_pop2)
    params.max_fit_pop2 = float(settings.max_fit_pop2)
    params.elite_size_pop2 = int(settings.elite_pop2)
    params.pop_size_pop2 = int(settings.pop_size_pop2)
    params.cx_prob_pop2 = float(settings.cx_prob_pop2)
    params.mut_flip_ind_pop2 = float(settings.mut_flip_ind_pop2)
    params.mut_flip_bit_pop2 = float(settings.mut_flip_bit_pop2)

    params.sensi_w = float(settings.sensi_w)
    params.speci_w = float(settings.speci_w)
    params.accuracy_w = float(settings.accuracy_w)
    params.ppv_w = float(settings.ppv_w)
    params.rmse_w = float(settings.rmse_w)
    params.rrse_w = float(settings.rrse_w)
    params.rae_w = float(settings.rae_w)
    params.mse_w = float(settings.mse_w)
    params.distance_threshold_w = float(settings.distance_threshold_w)
    params.distance_min_threshold_w = float(settings.distance_min_threshold_w)
    params.dont_care_w = float(settings.dont_care_w)
    params.over_learn_w = float(settings.over_learn_w)

    for pos in range(params.nb_out_vars):
        params.set_threshold_value(pos, settings.thresh)
    params.thresh_activated = bool(settings.thresh_activated)