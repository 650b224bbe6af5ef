"""Unit tests for StatsService."""

from pathlib import Path

import pytest

from seedstats.components.analyzers.spoiler_analyzers_comp import GoalAnalyzer
from seedstats.helpers.dto.stats_dto import StatsArgs, StatsJob
from seedstats.helpers.exceptions import CorpusExhaustedError
from seedstats.persistence.seed_storage import FileSeedStorage
from seedstats.services.config_svc import ConfigService
from seedstats.services.stats_svc import StatsService
from tests.fixtures.doubles import Failure, ScriptedGenerator, make_seed


def make_job(settings, generator, **arg_overrides):
    fields = {"settings": settings, "sample_size": 3, "analyzers": [[GoalAnalyzer()]], **arg_overrides}
    return StatsJob(args=StatsArgs(**fields), generator=generator, source="job.yaml")


@pytest.fixture
def service(isolated_config, memory_storage):
    return StatsService(ConfigService(), storage=memory_storage)


@pytest.mark.unit
class TestStatsServiceRun:
    def test_writes_csv_reports(self, service, settings, tmp_path):
        job = make_job(settings, ScriptedGenerator(fallback=make_seed(goals=["trees"])))

        result = service.run(job, output_dir=tmp_path / "out")

        assert result.reports[0].total() == 3
        assert [path.name for path in result.written] == ["goals.csv"]
        assert result.written[0].read_text(encoding="utf-8") == "Goals, Count\ntrees, 3\n"

    def test_default_output_dir_from_config(self, service, settings, isolated_config):
        job = make_job(settings, ScriptedGenerator(fallback=make_seed(goals=["trees"])))

        result = service.run(job)

        assert result.written == [Path("stats") / "goals.csv"]
        assert (isolated_config / "stats" / "goals.csv").is_file()

    def test_empty_output_dir_disables_export(self, service, settings):
        job = make_job(settings, ScriptedGenerator(fallback=make_seed(goals=["trees"])))

        assert service.run(job, output_dir="").written == []

    def test_sample_size_override(self, service, settings):
        generator = ScriptedGenerator(fallback=make_seed(goals=["trees"]))

        result = service.run(make_job(settings, generator), sample_size=5, output_dir="")

        assert generator.calls == 5
        assert result.reports[0].total() == 5

    def test_overwrite_flag(self, service, settings, memory_storage):
        memory_storage.store(settings, make_seed(goals=["wisps"]))
        generator = ScriptedGenerator(fallback=make_seed(goals=["trees"]))

        result = service.run(make_job(settings, generator, sample_size=1), overwrite=True, output_dir="")

        assert result.reports[0].data == {("trees",): 1}

    def test_budget_defaults_come_from_config(self, isolated_config, monkeypatch, memory_storage, settings):
        monkeypatch.setenv("SEEDSTATS_TOLERATED_ERRORS_FLOOR", "2")
        service = StatsService(ConfigService(), storage=memory_storage)
        generator = ScriptedGenerator([Failure()] * 2, fallback=make_seed())

        result = service.run(make_job(settings, generator), output_dir="")

        assert generator.calls == 5
        assert result.reports[0].total() == 3

    def test_job_budget_is_kept(self, service, settings):
        generator = ScriptedGenerator([Failure()], fallback=make_seed())

        with pytest.raises(CorpusExhaustedError):
            service.run(make_job(settings, generator, tolerated_errors=0), output_dir="")


@pytest.mark.unit
class TestStatsServiceStorage:
    def test_file_storage_from_config(self, isolated_config):
        service = StatsService(ConfigService({"seed_storage_dir": str(isolated_config / "cache")}))

        assert isinstance(service.storage, FileSeedStorage)
        assert service.storage.root_dir == isolated_config / "cache"

    def test_clean(self, service, settings, memory_storage):
        memory_storage.store(settings, make_seed())

        service.clean(make_job(settings, ScriptedGenerator()))

        assert memory_storage.count(settings) == 0
