"""
Lead time tests
"""

import pytest
import sys
from datetime import timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from lazyfestival.lead_times import LeadTime, reminder_text


class TestLeadTime:
    """LeadTime tests"""

    def test_labels(self):
        assert [lead.label for lead in LeadTime] == [
            "5 minutes", "15 minutes", "30 minutes", "1 hour", "2 hours",
        ]

    def test_delta(self):
        assert LeadTime.HOUR_2.delta == timedelta(hours=2)

    @pytest.mark.parametrize("minutes", [0, 10, 45, 90, -5])
    def test_unsupported_values(self, minutes):
        with pytest.raises(ValueError):
            LeadTime(minutes)

    def test_reminder_text(self):
        assert reminder_text(LeadTime.MIN_15, "Alpha") == '🔔 15 minutes until "Alpha"'


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
