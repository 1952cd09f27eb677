# enigmaar

Building blocks for astrological research software:

- reference tables for aspects, ayanamshas, house systems, zodiac signs,
  time zones, chart points, coordinate systems, ratings, chart categories,
  calendars and wheel types;
- request, response and value models for chart calculations;
- services that check their input and then hand it to a calculator, handler
  or store that you provide.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Reference data

Each table is an `IntEnum` plus a function that returns the full list of
entries, in key order. A lookup function returns the entry for a single key.
It accepts an enum member or a plain integer, and raises `ValueError` for an
integer that is not a member.

| Module | Enum | Entry | All entries | Lookup |
| --- | --- | --- | --- | --- |
| `enigmaar.aspects` | `Aspect` | `AspectData` | `all_aspects()` | `aspect_data()` |
| `enigmaar.ayanamshas` | `Ayanamsha` | `AyanamshaData` | `all_ayanamshas()` | `ayanamsha_data()` |
| `enigmaar.housesystems` | `HouseSystem` | `HouseSystemData` | `all_house_systems()` | `house_system_data()` |
| `enigmaar.signs` | `Sign` | `SignData` | `all_signs()` | `sign_data()` |
| `enigmaar.timezones` | `TimeZone` | `TimeZoneData` | `all_time_zones()` | `time_zone_data()` |
| `enigmaar.chartpoints` | `ChartPoint` | `ChartPointData` | `all_chart_points()` | `chart_point_data()` |

```python
from enigmaar.aspects import Aspect, aspect_data
from enigmaar.signs import Sign, sign_data
from enigmaar.housesystems import HouseSystem, house_system_data

aspect_data(Aspect.TRINE).distance              # 120.0
sign_data(Sign.LEO).index                       # 5
house_system_data(HouseSystem.PLACIDUS).code    # "P"
```

`enigmaar.references` holds the smaller enumerations (`CoordinateSystem`,
`ObserverPosition`, `ProjectionType`, `Rating`, `ChartCat`, `Calendar`,
`CalculationCat`, `PointCat`, `WheelType`). Functions such as
`all_coordinate_systems()` and `all_calendars()` return `ReferenceText`
entries that pair a member with its text id. The module also defines the
limits that the services check against, for example `MIN_JD_GENERAL`,
`MAX_GEO_LAT` and `MAX_MULTIPLICATION_CGROUPS`.

## Models

`enigmaar.models` defines the values passed to and returned by the
services. Among them:

- position types: `SinglePosition`, `DoublePosition`;
- analysis results: `Midpoint`, `OccupiedMidpoint`, `MatchedParallel`,
  `ActualAspect`;
- requests: `FullChartRequest`, `PointPositionsRequest`,
  `PointRangeRequest`, `HousePosRequest`;
- results: `FullChartResponse`, `PointPosResult`, `PointRangeResult`,
  `HousePosResult`;
- other values: `DateTime`, `DateTimeHms`, `StandardInputItem`, `Country`,
  `City`, `PersistableChart`, `PersistableDateLocation`, `FullChartMeta`,
  `ConfigPoint`, `ConfigAspect`.

The module also defines the midpoint dials, `MpDial`, and
`all_mp_dials()`.

## Services

Each service takes its collaborator when it is created. The collaborator is
any object that implements the matching protocol. The service checks the
input first. If the input is invalid, it raises `ValueError` and does not
call the collaborator.

```python
from enigmaar.harmonic_service import HarmonicService
from enigmaar.models import SinglePosition


class MyHarmonics:
    def calc_harmonics(self, positions, harmonic_nr):
        return [
            SinglePosition(p.id, (p.position * harmonic_nr) % 360.0)
            for p in positions
        ]


service = HarmonicService(MyHarmonics())
service.harmonics([SinglePosition(0, 100.0)], 2.0)
service.harmonics([SinglePosition(0, 400.0)], 2.0)  # raises ValueError
```

| Module | Service | Protocol |
| --- | --- | --- |
| `enigmaar.aspect_service` | `AspectService` | `AspectsCalculator` |
| `enigmaar.midpoint_service` | `MidpointService` | `MidpointsCalculator` |
| `enigmaar.declmidpoint_service` | `DeclinationMidpointService` | `DeclMidpointsCalculator` |
| `enigmaar.parallel_service` | `ParallelService` | `ParallelsCalculator` |
| `enigmaar.harmonic_service` | `HarmonicService` | `HarmonicsCalculator` |
| `enigmaar.longequiv_service` | `LongEquivService` | `LongEquivCalculator` |
| `enigmaar.fullchart_service` | `FullChartService` | `FullChartCalculator` |
| `enigmaar.fullpoint_service` | `FullPointService` | `PointPosCalculator` |
| `enigmaar.fullpoint_service` | `PointRangeService` | `PointRangeCalculator` |
| `enigmaar.location_service` | `LocationService` | `LocationHandler` |
| `enigmaar.timezone_service` | `TimeZoneService` | `TimeZoneHandler` |
| `enigmaar.cgroup_service` | `CGroupService` | `ControlGroupCreator` |
| `enigmaar.datetime_service` | `JulDayService` | `JulDayCalculator` |
| `enigmaar.datetime_service` | `RevJulDayService` | `RevJulDayCalculator` |
| `enigmaar.persistency_service` | `PersistencyService` | `PersistencyStore` |

`PointRangeService`, `JulDayService`, `RevJulDayService` and
`PersistencyService` do no checks of their own. They pass each call
straight to their collaborator.

The services log through the standard `logging` module, with one logger per
module.

## What the package does not do

The package calculates nothing astronomical or astrological itself. It has
no ephemeris, no house or aspect calculation, and no julian day arithmetic.
It also has no country, city or time zone database, and no file or chart
storage. You supply these through the protocols above. The package has no
command-line interface and no user interface.