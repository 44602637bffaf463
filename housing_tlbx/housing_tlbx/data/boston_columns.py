"""Column definitions for the Boston housing dataset."""

from .base_columns import BaseColumn, ColumnKind, ColumnMetadata


class BostonColumn(BaseColumn):
    """Column names for the Boston housing dataset (Harrison & Rubinfeld, 1978).

    Values are the descriptive names produced by the companion metadata table;
    the short names of the raw CSV are kept as ``original_name``.

    Columns:
    - ``per_capita_crime_rate``: float - Per capita crime rate by town
    - ``residential_land_zoned``: float - Proportion of residential land zoned for lots over 25,000 sq.ft.
    - ``non_retail_business_acres``: float - Proportion of non-retail business acres per town
    - ``bounds_charles_river``: category - Charles River dummy (1 if tract bounds river; 0 otherwise)
    - ``nitric_oxides_concentration``: float - Nitric oxides concentration (parts per 10 million)
    - ``number_of_rooms_per_dwelling``: float - Average number of rooms per dwelling
    - ``units_built_before_1940``: float - Proportion of owner-occupied units built prior to 1940
    - ``distance_to_employment_centres``: float - Weighted mean of distances to five Boston employment centres
    - ``radial_highway_accessibility``: int - Index of accessibility to radial highways
    - ``property_tax_rate``: int - Full-value property-tax rate per $10,000
    - ``pupil_teacher_ratio``: float - Pupil-teacher ratio by town
    - ``black_population_index``: float - 1000(Bk - 0.63)^2 where Bk is the proportion of Black residents by town
    - ``lower_status_population``: float - Lower status of the population (percent)
    - ``median_house_value``: float - Median value of owner-occupied homes in $1000s (dependent variable)
    """

    # Dependent variable
    TARGET = "median_house_value"
    """Median value of owner-occupied homes in $1000s."""
    MEDIAN_HOUSE_VALUE = TARGET

    # Neighbourhood
    CRIME_RATE = "per_capita_crime_rate"
    RESIDENTIAL_LAND = "residential_land_zoned"
    BUSINESS_ACRES = "non_retail_business_acres"
    CHARLES_RIVER = "bounds_charles_river"
    """Charles River dummy, re-typed as categorical on load."""
    NOX = "nitric_oxides_concentration"

    # Dwelling
    ROOMS = "number_of_rooms_per_dwelling"
    AGE = "units_built_before_1940"

    # Accessibility
    DISTANCE = "distance_to_employment_centres"
    HIGHWAY_ACCESS = "radial_highway_accessibility"

    # Socio-economic
    TAX_RATE = "property_tax_rate"
    PUPIL_TEACHER_RATIO = "pupil_teacher_ratio"
    BLACK_INDEX = "black_population_index"
    LOWER_STATUS = "lower_status_population"

    def metadata(self) -> ColumnMetadata:
        """Get metadata for this column."""
        return _COLUMN_METADATA_BOSTON[self]


_COLUMN_METADATA_BOSTON: dict[BostonColumn, ColumnMetadata] = {
    BostonColumn.CRIME_RATE: ColumnMetadata(
        original_name="crim",
        cleaned_name="per_capita_crime_rate",
        dtype="float64",
        kind=ColumnKind.NUMERIC,
        description="Per capita crime rate by town",
    ),
    BostonColumn.RESIDENTIAL_LAND: ColumnMetadata(
        original_name="zn",
        cleaned_name="residential_land_zoned",
        dtype="float64",
        kind=ColumnKind.NUMERIC,
        description="Proportion of residential land zoned for lots over 25,000 sq.ft.",
    ),
    BostonColumn.BUSINESS_ACRES: ColumnMetadata(
        original_name="indus",
        cleaned_name="non_retail_business_acres",
        dtype="float64",
        kind=ColumnKind.NUMERIC,
        description="Proportion of non-retail business acres per town",
    ),
    BostonColumn.CHARLES_RIVER: ColumnMetadata(
        original_name="chas",
        cleaned_name="bounds_charles_river",
        dtype="category",
        kind=ColumnKind.CATEGORICAL,
        description="Charles River dummy variable (1 if tract bounds river; 0 otherwise)",
    ),
    BostonColumn.NOX: ColumnMetadata(
        original_name="nox",
        cleaned_name="nitric_oxides_concentration",
        dtype="float64",
        kind=ColumnKind.NUMERIC,
        description="Nitric oxides concentration (parts per 10 million)",
    ),
    BostonColumn.ROOMS: ColumnMetadata(
        original_name="rm",
        cleaned_name="number_of_rooms_per_dwelling",
        dtype="float64",
        kind=ColumnKind.NUMERIC,
        description="Average number of rooms per dwelling",
    ),
    BostonColumn.AGE: ColumnMetadata(
        original_name="age",
        cleaned_name="units_built_before_1940",
        dtype="float64",
        kind=ColumnKind.NUMERIC,
        description="Proportion of owner-occupied units built prior to 1940",
    ),
    BostonColumn.DISTANCE: ColumnMetadata(
        original_name="dis",
        cleaned_name="distance_to_employment_centres",
        dtype="float64",
        kind=ColumnKind.NUMERIC,
        description="Weighted mean of distances to five Boston employment centres",
    ),
    BostonColumn.HIGHWAY_ACCESS: ColumnMetadata(
        original_name="rad",
        cleaned_name="radial_highway_accessibility",
        dtype="int64",
        kind=ColumnKind.NUMERIC,
        description="Index of accessibility to radial highways",
    ),
    BostonColumn.TAX_RATE: ColumnMetadata(
        original_name="tax",
        cleaned_name="property_tax_rate",
        dtype="int64",
        kind=ColumnKind.NUMERIC,
        description="Full-value property-tax rate per $10,000",
    ),
    BostonColumn.PUPIL_TEACHER_RATIO: ColumnMetadata(
        original_name="ptratio",
        cleaned_name="pupil_teacher_ratio",
        dtype="float64",
        kind=ColumnKind.NUMERIC,
        description="Pupil-teacher ratio by town",
    ),
    BostonColumn.BLACK_INDEX: ColumnMetadata(
        original_name="black",
        cleaned_name="black_population_index",
        dtype="float64",
        kind=ColumnKind.NUMERIC,
        description="1000(Bk - 0.63)^2 where Bk is the proportion of Black residents by town",
    ),
    BostonColumn.LOWER_STATUS: ColumnMetadata(
        original_name="lstat",
        cleaned_name="lower_status_population",
        dtype="float64",
        kind=ColumnKind.NUMERIC,
        description="Lower status of the population (percent)",
    ),
    BostonColumn.TARGET: ColumnMetadata(
        original_name="medv",
        cleaned_name="median_house_value",
        dtype="float64",
        kind=ColumnKind.NUMERIC,
        description="Median value of owner-occupied homes in $1000s",
    ),
}
