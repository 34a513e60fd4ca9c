from tabset.core.data.dataset import Dataset
from tabset.core.data.series import Series
from tabset.interfaces import SeriesSummary

SUMMARY_FIELDS = (
    "length",
    "non_blank",
    "numeric",
    "sum",
    "mean",
    "var_p",
    "stddev_p",
    "var_s",
    "stddev_s",
)


def describe_series(series: Series) -> SeriesSummary:
    return {
        "length": float(len(series)),
        "non_blank": float(series.count_non_blank()),
        "numeric": float(series.count_numeric()),
        "sum": series.sum(),
        "mean": series.mean(),
        "var_p": series.population_variance(),
        "stddev_p": series.population_stddev(),
        "var_s": series.sample_variance(),
        "stddev_s": series.sample_stddev(),
    }


def describe_dataset(dataset: Dataset, trim: bool = False) -> list[tuple[str, SeriesSummary]]:
    summaries: list[tuple[str, SeriesSummary]] = []
    for column in dataset:
        series = column.series.trimmed() if trim else column.series
        summaries.append((column.label, describe_series(series)))
    return summaries
