import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ParkingSpot',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('spot_number', models.CharField(max_length=10, unique=True)),
                ('license_plate', models.CharField(max_length=7, unique=True)),
                ('brand', models.CharField(max_length=70)),
                ('model', models.CharField(max_length=70)),
                ('color', models.CharField(max_length=70)),
                ('responsible_name', models.CharField(max_length=130)),
                ('apartment', models.CharField(max_length=30)),
                ('block', models.CharField(max_length=30)),
                ('registered_at', models.DateTimeField()),
            ],
            options={
                'db_table': 'parking_spot',
                'ordering': ['id'],
            },
        ),
        migrations.AddConstraint(
            model_name='parkingspot',
            constraint=models.UniqueConstraint(fields=('apartment', 'block'), name='unique_parking_spot_apartment_block'),
        ),
    ]
