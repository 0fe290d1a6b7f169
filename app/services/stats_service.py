# app/services/stats_service.py
from sqlmodel import Session

from app.repositories.stats_repo import StatsRepository
from app.schemas.stats import DashboardStats, RecentClient, RecentProfile


class StatsService:
    """
    Orchestrates aggregated admin dashboard statistics.
    """

    def __init__(self, repo: StatsRepository):
        self.repo = repo

    def get_dashboard_stats(self, session: Session, recent_n: int = 5) -> DashboardStats:
        recent_clients = [
            RecentClient(id=u.id, email=u.email, created_at=u.created_at)
            for u in self.repo.recent_clients(session, limit=recent_n)
        ]

        recent_profiles: list[RecentProfile] = []
        for profile, owner_email in self.repo.recent_profiles(session, limit=recent_n):
            recent_profiles.append(
                RecentProfile(
                    id=profile.id,
                    user_id=profile.user_id,
                    name=profile.name,
                    owner_email=owner_email,
                    created_at=profile.created_at,
                )
            )

        return DashboardStats(
            total_clients=self.repo.count_clients(session),
            clients_with_profiles=self.repo.count_profiles(session),
            total_services=self.repo.count_services(session),
            total_products=self.repo.count_products(session),
            total_testimonials=self.repo.count_testimonials(session),
            recent_clients=recent_clients,
            recent_profiles=recent_profiles,
        )
