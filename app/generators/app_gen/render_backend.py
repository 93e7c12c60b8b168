"""Supabase schema, row-level-security policies and edge functions."""
from typing import Dict, List, Optional

from app.generators.app_gen.field_registry import FieldRegistry
from app.generators.app_gen.templates import CodeTemplate
from app.generators.app_gen.types import (
    AppSpecification,
    GeneratedBackend,
    InfrastructureSelection,
)
from app.generators.app_gen.utils import (
    endpoint_to_function_name,
    model_to_table,
    ts_string,
)


UPDATED_AT_FUNCTION = """CREATE OR REPLACE FUNCTION public.update_updated_at_column()
RETURNS TRIGGER AS $$
BEGIN
  NEW.updated_at = now();
  RETURN NEW;
END;
$$ LANGUAGE plpgsql;
"""

CREATE_TABLE = CodeTemplate(
    name="create-table",
    params=("table", "columns"),
    skeleton="""CREATE TABLE IF NOT EXISTS public.@@table (
  id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
  user_id UUID REFERENCES auth.users(id) ON DELETE CASCADE,
@@columns  created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
  updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
);

ALTER TABLE public.@@table ENABLE ROW LEVEL SECURITY;
""",
)

UPDATE_TRIGGER = CodeTemplate(
    name="update-trigger",
    params=("table",),
    skeleton="""DROP TRIGGER IF EXISTS update_@@{table}_updated_at ON public.@@table;
CREATE TRIGGER update_@@{table}_updated_at
  BEFORE UPDATE ON public.@@table
  FOR EACH ROW EXECUTE FUNCTION public.update_updated_at_column();
""",
)

# (action, verb used in the policy name, clause)
POLICY_ACTIONS = (
    ("SELECT", "view", "USING"),
    ("INSERT", "create", "WITH CHECK"),
    ("UPDATE", "update", "USING"),
    ("DELETE", "delete", "USING"),
)

EDGE_FUNCTION = CodeTemplate(
    name="edge-function",
    params=("function_name", "table"),
    skeleton="""// Edge function: @@function_name
import { serve } from 'https://deno.land/std@0.168.0/http/server.ts';
import { createClient } from 'https://esm.sh/@supabase/supabase-js@2';

const corsHeaders = {
  'Access-Control-Allow-Origin': '*',
  'Access-Control-Allow-Headers': 'authorization, x-client-info, apikey, content-type',
};

const jsonResponse = (body: unknown, status = 200) =>
  new Response(JSON.stringify(body), {
    status,
    headers: { ...corsHeaders, 'Content-Type': 'application/json' },
  });

serve(async (req) => {
  if (req.method === 'OPTIONS') {
    return new Response(null, { headers: corsHeaders });
  }

  try {
    const authHeader = req.headers.get('Authorization') ?? '';
    const token = authHeader.replace('Bearer ', '');
    if (!token) {
      throw new Error('Unauthorized');
    }

    const supabase = createClient(
      Deno.env.get('SUPABASE_URL') ?? '',
      Deno.env.get('SUPABASE_ANON_KEY') ?? '',
      { global: { headers: { Authorization: authHeader } } }
    );

    if (req.method === 'GET') {
      const { data, error } = await supabase.from(@@table).select('*');
      if (error) throw error;
      return jsonResponse({ data });
    }

    if (req.method === 'POST') {
      const body = await req.json();
      const { data, error } = await supabase.from(@@table).insert(body).select();
      if (error) throw error;
      return jsonResponse({ data }, 201);
    }

    return jsonResponse({ error: 'Method not allowed' }, 405);
  } catch (error) {
    const message = error instanceof Error ? error.message : 'Unknown error';
    return jsonResponse({ error: message }, 400);
  }
});
""",
)


def render_policies(table: str) -> List[str]:
    """The four owner-scoped policies for a table, in select/insert/update/delete order."""
    policies = []
    for action, verb, clause in POLICY_ACTIONS:
        policies.append(
            f'CREATE POLICY "Users can {verb} their own {table}" ON public.{table} '
            f"FOR {action} {clause} (auth.uid() = user_id);"
        )
    return policies


def render_table(model: str, registry: FieldRegistry) -> str:
    table = model_to_table(model)
    columns = "".join(f"  {field.column} {field.sql_type},\n" for field in registry.get(model))
    return CREATE_TABLE.render(table=table, columns=columns)


def render_edge_function(endpoint: str) -> str:
    function_name = endpoint_to_function_name(endpoint)
    return EDGE_FUNCTION.render(function_name=function_name, table=ts_string(function_name))


def synthesize_backend(
    spec: AppSpecification,
    infra: Optional[InfrastructureSelection] = None,
    registry: Optional[FieldRegistry] = None,
) -> GeneratedBackend:
    """
    Schema, RLS statements and one edge function per API endpoint.

    The schema is empty when there are no data models. ``infra`` is accepted
    for symmetry with the other stages; the Supabase output does not vary by
    infrastructure.
    """
    registry = registry or FieldRegistry.default()

    sections = []
    rls = []
    for model in spec.data_models:
        table = model_to_table(model)
        policies = render_policies(table)
        sections.append(render_table(model, registry) + "\n" + "\n".join(policies) + "\n")
        sections.append(UPDATE_TRIGGER.render(table=table))
        rls.extend(policies)

    schema = ""
    if sections:
        schema = "\n".join([UPDATED_AT_FUNCTION] + sections)

    edge_functions = {}
    for endpoint in spec.api_endpoints:
        edge_functions[endpoint_to_function_name(endpoint)] = render_edge_function(endpoint)

    return GeneratedBackend(schema=schema, edge_functions=edge_functions, rls=rls)
