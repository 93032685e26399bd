import uuid

import django.db.models.deletion
import django.db.models.functions.text
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Brand',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'brands',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Region',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'regions',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Blend',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('brand', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='blends', to='catalog.brand')),
                ('region', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='blends', to='catalog.region')),
            ],
            options={
                'db_table': 'blends',
                'ordering': ['name'],
            },
        ),
        migrations.AddConstraint(
            model_name='brand',
            constraint=models.UniqueConstraint(django.db.models.functions.text.Lower('name'), name='brands_name_ci_unique'),
        ),
        migrations.AddConstraint(
            model_name='region',
            constraint=models.UniqueConstraint(django.db.models.functions.text.Lower('name'), name='regions_name_ci_unique'),
        ),
        migrations.AddIndex(
            model_name='blend',
            index=models.Index(fields=['brand', 'region'], name='blends_brand_region_idx'),
        ),
        migrations.AddConstraint(
            model_name='blend',
            constraint=models.UniqueConstraint(django.db.models.functions.text.Lower('name'), models.F('brand'), models.F('region'), name='blends_name_brand_region_ci_unique'),
        ),
    ]
