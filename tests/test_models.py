"""Tests for monitor client data models."""

import dataclasses

import pytest

from monitor_client.core.models import BaseDetail, CpuTicks, FileSystemRoot, RuntimeDetail


def make_base_detail():
    return BaseDetail(
        os_arch="amd64",
        os_name="Linux",
        os_version="6.1.0",
        os_bit=64,
        cpu_name="AMD EPYC 7763",
        cpu_core=16,
        memory=31.2,
        disk=465.6,
        ip="10.0.0.5",
    )


def make_runtime_detail():
    return RuntimeDetail(
        cpu_usage=0.42,
        memory_usage=12.5,
        disk_usage=210.0,
        network_upload=3.5,
        network_download=120.25,
        disk_read=1.5,
        disk_write=0.25,
        timestamp=1_700_000_000_000,
    )


def test_base_detail_is_frozen():
    """Test BaseDetail cannot be modified after creation."""
    detail = make_base_detail()

    with pytest.raises(dataclasses.FrozenInstanceError):
        detail.ip = "10.0.0.6"


def test_runtime_detail_is_frozen():
    """Test RuntimeDetail cannot be modified after creation."""
    detail = make_runtime_detail()

    with pytest.raises(dataclasses.FrozenInstanceError):
        detail.cpu_usage = 1.0


def test_base_detail_to_dict():
    """Test BaseDetail serializes with camelCase keys."""
    assert make_base_detail().to_dict() == {
        "osArch": "amd64",
        "osName": "Linux",
        "osVersion": "6.1.0",
        "osBit": 64,
        "cpuName": "AMD EPYC 7763",
        "cpuCore": 16,
        "memory": 31.2,
        "disk": 465.6,
        "ip": "10.0.0.5",
    }


def test_runtime_detail_to_dict():
    """Test RuntimeDetail serializes with camelCase keys."""
    data = make_runtime_detail().to_dict()

    assert list(data) == [
        "cpuUsage",
        "memoryUsage",
        "diskUsage",
        "networkUpload",
        "networkDownload",
        "diskRead",
        "diskWrite",
        "timestamp",
    ]
    assert data["timestamp"] == 1_700_000_000_000


def test_cpu_ticks_total_and_busy():
    """Test tick totals cover all eight categories."""
    ticks = CpuTicks(user=1, nice=2, system=3, idle=4, iowait=5, irq=6, softirq=7, steal=8)

    assert ticks.total == 36
    assert ticks.busy == 4


def test_filesystem_root_used_bytes():
    root = FileSystemRoot("/", total_bytes=1000, free_bytes=250)

    assert root.used_bytes == 750
