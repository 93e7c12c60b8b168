"""Data hooks: Supabase authentication and Fireproof local-first access."""
from typing import Dict, Optional

from app.generators.app_gen.catalog import LOCAL_FIRST_DATABASE
from app.generators.app_gen.templates import CodeTemplate
from app.generators.app_gen.types import AppSpecification, InfrastructureSelection
from app.generators.app_gen.utils import slugify, ts_string


AUTH_HOOK = CodeTemplate(
    name="useAuth.ts",
    params=(),
    skeleton="""import { useEffect, useState, useCallback } from 'react';
import type { Session, User as AuthUser } from '@supabase/supabase-js';
import { supabase } from '@/lib/supabase';

export const useAuth = () => {
  const [user, setUser] = useState<AuthUser | null>(null);
  const [session, setSession] = useState<Session | null>(null);
  const [loading, setLoading] = useState(true);

  useEffect(() => {
    supabase.auth.getSession().then(({ data }) => {
      setSession(data.session);
      setUser(data.session?.user ?? null);
      setLoading(false);
    });

    const { data: listener } = supabase.auth.onAuthStateChange((_event, newSession) => {
      setSession(newSession);
      setUser(newSession?.user ?? null);
    });

    return () => listener.subscription.unsubscribe();
  }, []);

  const signIn = useCallback(async (email: string, password: string) => {
    const { error } = await supabase.auth.signInWithPassword({ email, password });
    if (error) throw error;
  }, []);

  const signUp = useCallback(async (email: string, password: string) => {
    const { error } = await supabase.auth.signUp({ email, password });
    if (error) throw error;
  }, []);

  const signOut = useCallback(async () => {
    const { error } = await supabase.auth.signOut();
    if (error) throw error;
  }, []);

  return { user, session, loading, signIn, signUp, signOut };
};
""",
)

FIREPROOF_HOOK = CodeTemplate(
    name="useFireproof.ts",
    params=("db_name",),
    skeleton="""import { useCallback } from 'react';
import { useFireproof } from 'use-fireproof';

export const DATABASE_NAME = @@db_name;

export const useFireproofData = (type: string = 'item') => {
  const { database, useLiveQuery } = useFireproof(DATABASE_NAME);
  const result = useLiveQuery('type', { key: type });

  const addDocument = useCallback(
    async (doc: Record<string, unknown>) => {
      const now = new Date().toISOString();
      return database.put({ ...doc, type, createdAt: now, updatedAt: now });
    },
    [database, type]
  );

  const updateDocument = useCallback(
    async (id: string, changes: Record<string, unknown>) => {
      const existing = await database.get(id);
      return database.put({ ...existing, ...changes, updatedAt: new Date().toISOString() });
    },
    [database]
  );

  const deleteDocument = useCallback(
    async (id: string) => database.del(id),
    [database]
  );

  return {
    documents: result.docs as Array<Record<string, any>>,
    isLoading: false,
    addDocument,
    updateDocument,
    deleteDocument,
  };
};
""",
)


def fireproof_database_name(spec: AppSpecification) -> str:
    """Local database name derived from the app title (RecipeShare -> recipeshare-db)."""
    return f"{slugify(spec.title)}-db"


def synthesize_hooks(spec: AppSpecification, infra: Optional[InfrastructureSelection] = None) -> Dict[str, str]:
    """
    Conditional hooks.

    useAuth.ts is emitted only when "User" is a data model, useFireproof.ts only
    when the local-first database is selected.
    """
    hooks = {}
    if "User" in spec.data_models:
        hooks["useAuth.ts"] = AUTH_HOOK.render()
    if infra is not None and infra.database == LOCAL_FIRST_DATABASE:
        hooks["useFireproof.ts"] = FIREPROOF_HOOK.render(db_name=ts_string(fireproof_database_name(spec)))
    return hooks
