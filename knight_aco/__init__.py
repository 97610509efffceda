from .board import KnightBoard, Square, Move, NUM_SQUARES, TOUR_LENGTH
from .aco_base import ACOConfig, ColonyResult, weighted_choice
from .ant import Ant
from .colony import TourFinder
from .experiments import run_parameter_sweep, run_repeated_trials
