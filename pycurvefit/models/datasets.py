"""
Reference datasets for examples and tests.

Small hand-entered sample sets, each paired with the axis names to show
and the family that generated it.
"""

from __future__ import annotations

from dataclasses import dataclass

from pycurvefit.models.design import SampleSet
from pycurvefit.models.families import ModelFamily


@dataclass(frozen=True)
class ExampleDataset:
    """A named sample set with axis labels and its generating family."""
    title: str
    description: str
    x_label: str
    x_unit: str
    y_label: str
    y_unit: str
    samples: SampleSet
    family: ModelFamily


# Taxi fare - base fare 5 plus 2 per km
taxi_fare = ExampleDataset(
    title='Taxi fare',
    description='Trip cost by distance travelled.',
    x_label='Distance',
    x_unit='km',
    y_label='Cost',
    y_unit='currency units',
    samples=SampleSet.from_points([
        (0.0, 5.0),
        (2.0, 9.0),
        (5.0, 15.0),
        (8.0, 21.0),
        (10.0, 25.0),
    ]),
    family=ModelFamily.LINEAR,
)

# Projectile launch - h = 30t - 5t²
projectile = ExampleDataset(
    title='Projectile launch',
    description='Height of an object thrown straight up.',
    x_label='Time',
    x_unit='s',
    y_label='Height',
    y_unit='m',
    samples=SampleSet.from_points([
        (0.0, 0.0),
        (1.0, 25.0),
        (2.0, 40.0),
        (3.0, 45.0),
        (4.0, 40.0),
        (5.0, 25.0),
    ]),
    family=ModelFamily.QUADRATIC,
)

# Bacterial growth - roughly 100·1.5^t, counts rounded down
bacterial_growth = ExampleDataset(
    title='Bacterial growth',
    description='Number of bacteria in a controlled culture.',
    x_label='Time',
    x_unit='h',
    y_label='Population',
    y_unit='bacteria',
    samples=SampleSet.from_points([
        (0.0, 100.0),
        (1.0, 150.0),
        (2.0, 225.0),
        (3.0, 337.0),
        (4.0, 506.0),
        (5.0, 759.0),
    ]),
    family=ModelFamily.EXPONENTIAL,
)

EXAMPLES: dict[str, ExampleDataset] = {
    'linear': taxi_fare,
    'quadratic': projectile,
    'exponential': bacterial_growth,
}
