# seed_competitions.py
import sys
from datetime import date, timedelta

from dotenv import load_dotenv

load_dotenv()

from app import create_app
from app.extensions import db
from app.helpers.countries import seed_countries
from app.models import Competition

def main(num_competitions=0):
    app = create_app()
    with app.app_context():
        db.create_all()

        added = seed_countries()
        print(f"Added {added} countries.")

        existing = Competition.query.count()
        print(f"Existing competitions: {existing}")

        start = date.today()
        for i in range(num_competitions):
            n = existing + i + 1
            day = start + timedelta(days=7 * i)
            db.session.add(
                Competition(
                    id=f"SampleOpen{n}{day.year}",
                    name=f"Sample Open {n} {day.year}",
                    city_name="Sample City",
                    country_id="USA",
                    start_date=day,
                    end_date=day + timedelta(days=1),
                    show_at_all=True,
                    is_confirmed=True,
                )
            )

        db.session.commit()
        total = Competition.query.count()
        print(f"Now have {total} competitions in the DB.")

if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 0)
